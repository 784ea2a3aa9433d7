"""
console.py

Plain stdout/stderr reporting for the viewer.  Kept in one place so the
navigation code never formats text itself.
"""
from __future__ import annotations

import sys

from compositor import Composition
from decoder import DecodeError


def loaded(path: str, index: int, total: int, comp: Composition) -> None:
    sw, sh = comp.source_size
    tw, th = comp.size
    print(f"Loaded: {path} ({index + 1}/{total})")
    print(f"  Original dimensions: {sw}x{sh}")
    print(f"  Display dimensions: {tw}x{th} (scale: {comp.scale:.2f})")


def failed(path: str, err: DecodeError) -> None:
    print(f"Failed to load {path}: {err.reason}", file=sys.stderr)


def closed() -> None:
    print("Image viewer closed.")
