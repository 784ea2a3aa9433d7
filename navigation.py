"""
navigation.py

Cursor over a fixed list of image paths, plus the framebuffer it keeps in
sync.  The index arithmetic lives in two pure functions so it can be tested
without touching the filesystem.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np
from PIL import Image

import config
import console
from compositor import Composition, load_into
from decoder import DecodeError, decode_image


# ── pure transitions ───────────────────────────────────────────────────────
def next_index(index: int, count: int) -> int:
    if count <= 1:
        return index
    return (index + 1) % count


def prev_index(index: int, count: int) -> int:
    if count <= 1:
        return index
    return count - 1 if index == 0 else index - 1


# ── controller ─────────────────────────────────────────────────────────────
class NavigationController:
    """Owns the image list, the cursor and the packed-RGB buffer."""

    def __init__(self,
                 paths: Sequence[str],
                 width: int = config.WIDTH,
                 height: int = config.HEIGHT,
                 decode: Callable[[str], Image.Image] = decode_image) -> None:
        self.paths  = tuple(paths)
        self.width  = width
        self.height = height
        self.index  = 0
        self.buffer = np.zeros(width * height, dtype=np.uint32)
        self.last_result: Optional[Composition] = None
        self._decode = decode

    @property
    def total(self) -> int:
        return len(self.paths)

    @property
    def current_path(self) -> Optional[str]:
        return self.paths[self.index] if self.paths else None

    # ---------------------------------------------------------------- loading
    def start(self) -> None:
        """Composite the first image; an empty list leaves the buffer black."""
        if self.paths:
            self._load()

    def _load(self) -> None:
        path = self.paths[self.index]
        try:
            self.last_result = load_into(path, self.buffer,
                                         self.width, self.height, self._decode)
        except DecodeError as err:
            self.last_result = None
            console.failed(path, err)
            return
        console.loaded(path, self.index, self.total, self.last_result)

    # ------------------------------------------------------------- navigation
    def _move_to(self, dest: int) -> bool:
        if dest == self.index:
            return False
        self.index = dest
        self._load()
        return True

    def advance(self) -> bool:
        return self._move_to(next_index(self.index, self.total))

    def retreat(self) -> bool:
        return self._move_to(prev_index(self.index, self.total))
