import numpy as np
import pytest
from PIL import Image

import config
from decoder import DecodeError
from navigation import NavigationController, next_index, prev_index

W, H = config.WIDTH, config.HEIGHT


class FakeDecoder:
    """Returns a fixed-size image per path; paths in *broken* fail."""

    def __init__(self, sizes=None, broken=()):
        self.sizes  = sizes or {}
        self.broken = set(broken)
        self.calls  = []

    def __call__(self, path):
        self.calls.append(path)
        if path in self.broken:
            raise DecodeError(path, "cannot identify image file")
        return Image.new("RGB", self.sizes.get(path, (1600, 1200)), (90, 90, 90))


# ── pure transitions ───────────────────────────────────────────────────────
def test_next_index_wraps():
    assert next_index(0, 3) == 1
    assert next_index(2, 3) == 0


def test_prev_index_wraps():
    assert prev_index(1, 3) == 0
    assert prev_index(0, 3) == 2


@pytest.mark.parametrize("count", [0, 1])
def test_transitions_noop_for_tiny_sets(count):
    assert next_index(0, count) == 0
    assert prev_index(0, count) == 0


@pytest.mark.parametrize("n", [2, 3, 7])
def test_full_cycle_returns_to_start(n):
    i = 0
    for _ in range(n):
        i = next_index(i, n)
    assert i == 0
    for _ in range(n):
        i = prev_index(i, n)
    assert i == 0


# ── controller ─────────────────────────────────────────────────────────────
def test_start_composites_first_image(capsys):
    dec = FakeDecoder()
    nav = NavigationController(["a.png", "b.png", "c.png"], W, H, decode=dec)
    nav.start()

    assert dec.calls == ["a.png"]
    assert nav.index == 0
    assert nav.buffer.shape == (W * H,)
    assert (nav.buffer != config.BACKGROUND).all()

    out = capsys.readouterr().out
    assert "a.png (1/3)" in out
    assert "1600x1200" in out
    assert "800x600" in out
    assert "scale: 0.50" in out


def test_retreat_from_start_wraps_to_last():
    dec = FakeDecoder()
    nav = NavigationController(["a", "b", "c"], W, H, decode=dec)
    nav.start()

    assert nav.retreat() is True
    assert nav.index == 2
    assert nav.current_path == "c"
    assert dec.calls == ["a", "c"]


def test_advance_reloads_each_step():
    dec = FakeDecoder(sizes={"b": (400, 100)})
    nav = NavigationController(["a", "b", "c"], W, H, decode=dec)
    nav.start()
    nav.advance()

    assert nav.current_path == "b"
    assert nav.last_result.offset == (0, 200)
    grid = nav.buffer.reshape(H, W)
    assert (grid[:200] == config.BACKGROUND).all()


def test_advance_n_times_returns_to_start():
    nav = NavigationController(["a", "b", "c", "d"], W, H, decode=FakeDecoder())
    nav.start()
    for _ in range(nav.total):
        nav.advance()
    assert nav.index == 0
    for _ in range(nav.total):
        nav.retreat()
    assert nav.index == 0


def test_single_image_does_not_reload():
    dec = FakeDecoder()
    nav = NavigationController(["only"], W, H, decode=dec)
    nav.start()

    assert nav.advance() is False
    assert nav.retreat() is False
    assert dec.calls == ["only"]


def test_empty_set_never_composites():
    dec = FakeDecoder()
    nav = NavigationController([], W, H, decode=dec)
    nav.start()

    assert dec.calls == []
    assert nav.current_path is None
    assert nav.advance() is False
    assert (nav.buffer == config.BACKGROUND).all()


def test_decode_failure_keeps_cursor_and_navigation(capsys):
    dec = FakeDecoder(broken={"b"})
    nav = NavigationController(["a", "b", "c"], W, H, decode=dec)
    nav.start()

    assert nav.advance() is True
    assert nav.index == 1
    assert nav.last_result is None
    assert (nav.buffer == config.ERROR_BACKGROUND).all()
    err = capsys.readouterr().err
    assert "b" in err and "cannot identify image file" in err

    nav.advance()
    assert nav.index == 2
    assert nav.last_result is not None
    nav.retreat()
    nav.retreat()
    assert nav.index == 0
    assert (nav.buffer != config.ERROR_BACKGROUND).any()


def test_real_non_image_file(tmp_path, make_image, capsys):
    good = make_image("good.png", (640, 480))
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"\x00" * 64)

    nav = NavigationController([good, str(bad)], W, H)
    nav.start()
    nav.advance()

    assert (nav.buffer == config.ERROR_BACKGROUND).all()
    assert str(bad) in capsys.readouterr().err

    nav.advance()
    assert nav.index == 0
    assert nav.buffer.dtype == np.uint32
    assert (nav.buffer != config.ERROR_BACKGROUND).all()
