import sys

import pygame

import config
from app import ImageViewer


def _usage(prog: str) -> str:
    return (
        f"Usage: {prog} <image_path> [image_path ...]\n"
        f"Supported formats: {', '.join(config.SUPPORTED_FORMATS)}\n"
        "Press ESC to close the window, or arrow keys to navigate multiple images"
    )


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    paths = list(argv[1:])
    if not paths:
        print(_usage(argv[0] if argv else "main.py"), file=sys.stderr)
        return 1

    try:
        viewer = ImageViewer(paths)
    except pygame.error as e:
        print(f"Failed to create window: {e}", file=sys.stderr)
        return 2

    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
