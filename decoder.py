"""
decoder.py

Thin wrapper around Pillow.  Every way a file can fail to become a bitmap
is folded into a single DecodeError so callers only handle one type.
"""
from __future__ import annotations

from PIL import Image


class DecodeError(Exception):
    """Raised when *path* cannot be opened or decoded as an image."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path   = path
        self.reason = reason


def decode_image(path: str) -> Image.Image:
    """
    Open *path* and fully decode it.

    Pillow opens lazily, so ``load()`` is forced here; a truncated JPEG
    would otherwise only blow up later inside the resize.
    """
    try:
        img = Image.open(path)
        img.load()
    except Image.DecompressionBombError as exc:
        raise DecodeError(path, str(exc)) from exc
    except (OSError, ValueError, EOFError, SyntaxError) as exc:
        # UnidentifiedImageError and "image file is truncated" are OSErrors
        raise DecodeError(path, str(exc)) from exc
    return img
