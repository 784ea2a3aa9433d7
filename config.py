# config.py
"""
Configuration settings for the image viewer.
"""

# ── Display settings ────────────────────────────────────────────────────────

WIDTH  = 800
HEIGHT = 600
FPS    = 60          # ~16 ms between loop iterations

WINDOW_TITLE = "Image Viewer - Press ESC to exit, Arrow keys to navigate"

# ── Colours (packed 0xRRGGBB) ──────────────────────────────────────────────

BACKGROUND       = 0x000000   # cleared before every composite
ERROR_BACKGROUND = 0x330000   # dark red tint shown when a file won't decode

# ── Help text ──────────────────────────────────────────────────────────────

SUPPORTED_FORMATS = ("PNG", "JPEG", "GIF", "BMP", "ICO", "TIFF", "WebP")
