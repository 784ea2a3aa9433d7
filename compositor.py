"""
compositor.py

Render one decoded image into a fixed-size packed-RGB framebuffer.

The buffer is a flat, row-major ``numpy.uint32`` array of width*height
cells, each holding ``(R << 16) | (G << 8) | B``.  Every call starts from a
cleared buffer, so nothing from the previous image survives outside the new
image's footprint.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np
from PIL import Image

import config
from decoder import DecodeError, decode_image


# ── Data structures ─────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Geometry:
    scale:  float
    size:   Tuple[int, int]      # target (w, h) after resizing
    offset: Tuple[int, int]      # top-left corner inside the buffer


@dataclass(frozen=True)
class Composition:
    source_size: Tuple[int, int]
    size:        Tuple[int, int]
    offset:      Tuple[int, int]
    scale:       float


# ── helpers ────────────────────────────────────────────────────────────────
def pack_rgb(r: int, g: int, b: int) -> int:
    return (int(r) << 16) | (int(g) << 8) | int(b)


def unpack_rgb(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """Packed buffer → HxWx3 uint8, ready for ``pygame.image.frombuffer``."""
    grid = buffer.reshape(height, width)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[..., 0] = (grid >> 16) & 0xFF
    rgb[..., 1] = (grid >> 8) & 0xFF
    rgb[..., 2] = grid & 0xFF
    return rgb


def fill(buffer: np.ndarray, colour: int) -> None:
    buffer.fill(colour)


def fit_geometry(src_w: int, src_h: int, out_w: int, out_h: int) -> Geometry:
    """Best-fit scale, target size and centring offsets (pure)."""
    if src_w <= 0 or src_h <= 0:
        return Geometry(0.0, (0, 0), (out_w // 2, out_h // 2))

    scale = min(out_w / src_w, out_h / src_h)
    tw = min(out_w, int(src_w * scale))
    th = min(out_h, int(src_h * scale))
    return Geometry(scale, (tw, th), ((out_w - tw) // 2, (out_h - th) // 2))


def _pack_array(rgb: np.ndarray) -> np.ndarray:
    px = rgb.astype(np.uint32)
    return (px[..., 0] << 16) | (px[..., 1] << 8) | px[..., 2]


def _blit(buffer: np.ndarray, packed: np.ndarray,
          out_w: int, out_h: int, ox: int, oy: int) -> None:
    """Copy *packed* (h×w) into the buffer at (ox, oy), dropping overflow."""
    h, w = packed.shape
    x0, y0 = max(0, ox), max(0, oy)
    x1, y1 = min(out_w, ox + w), min(out_h, oy + h)
    if x0 >= x1 or y0 >= y1:
        return
    grid = buffer.reshape(out_h, out_w)
    grid[y0:y1, x0:x1] = packed[y0 - oy:y1 - oy, x0 - ox:x1 - ox]


# ── main entry points ──────────────────────────────────────────────────────
def composite(image: Image.Image,
              buffer: np.ndarray,
              out_w: int,
              out_h: int) -> Composition:
    """
    Letter-/pillar-box *image* into *buffer* (in place).

    Uniform Lanczos resize to the largest size that fits, centred on a
    black background.
    """
    fill(buffer, config.BACKGROUND)

    src_w, src_h = image.size
    geo = fit_geometry(src_w, src_h, out_w, out_h)
    tw, th = geo.size

    if tw > 0 and th > 0:
        resized = image.convert("RGB").resize((tw, th), Image.Resampling.LANCZOS)
        _blit(buffer, _pack_array(np.asarray(resized)), out_w, out_h, *geo.offset)

    return Composition((src_w, src_h), geo.size, geo.offset, geo.scale)


def load_into(path: str,
              buffer: np.ndarray,
              out_w: int,
              out_h: int,
              decode: Callable[[str], Image.Image] = decode_image,
              ) -> Composition:
    """
    Decode *path* and composite it (composite clears the buffer itself).
    On a decode failure the buffer is tinted with ERROR_BACKGROUND before
    the DecodeError propagates; the caller logs it and keeps running.
    """
    try:
        image = decode(path)
    except DecodeError:
        fill(buffer, config.ERROR_BACKGROUND)
        raise
    return composite(image, buffer, out_w, out_h)
