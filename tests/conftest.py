import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Allow importing the viewer modules from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# Headless SDL for the window tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from events import EventManager  # noqa: E402


@pytest.fixture(autouse=True)
def empty_event_queue():
    EventManager.clear()
    yield
    EventManager.clear()


@pytest.fixture
def make_image(tmp_path):
    """Write a solid-colour image and return its path as a string."""
    def _make(name, size, colour=(200, 100, 50), fmt=None):
        path = tmp_path / name
        Image.new("RGB", size, colour).save(path, format=fmt)
        return str(path)
    return _make
