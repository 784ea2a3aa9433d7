#!/usr/bin/env python3
"""
events.py  – central hub

• Translates raw Pygame events to high-level action dicts.
• Exposes a queue so any other source (tests, scripts) can inject the
  same actions.
"""

from __future__ import annotations
import queue
from pygame.locals import *

Action = dict      # alias for readability

QUIT_ACTION = {"type": "quit"}
NEXT_ACTION = {"type": "navigate", "to": "next"}
PREV_ACTION = {"type": "navigate", "to": "prev"}


class EventManager:
    _fifo: "queue.Queue[Action]" = queue.Queue()

    # ── SDL / keyboard path ────────────────────────────────────────────
    @classmethod
    def handle(cls, event) -> None:
        """Translate one Pygame event → action and enqueue it."""
        act = cls._translate_pygame(event)
        if act:
            cls._fifo.put(act)

    # ── external / programmatic path ───────────────────────────────────
    @classmethod
    def post(cls, action: Action) -> None:
        """
        Inject an already-formed action dict, e.g.:
            EventManager.post({"type": "navigate", "to": "next"})
        """
        cls._fifo.put(action)

    # ── main-loop consumer ─────────────────────────────────────────────
    @classmethod
    def poll(cls) -> Action | None:
        """Return next queued action or None (non-blocking)."""
        try:
            return cls._fifo.get_nowait()
        except queue.Empty:
            return None

    @classmethod
    def clear(cls) -> None:
        """Drop every queued action (test isolation)."""
        while cls.poll() is not None:
            pass

    # ── internal translator ───────────────────────────────────────────
    @staticmethod
    def _translate_pygame(event) -> Action | None:
        if event.type == QUIT:
            return dict(QUIT_ACTION)

        # KEYDOWN fires once per physical press while key repeat is off
        if event.type == KEYDOWN:
            if event.key in (K_ESCAPE, K_q):
                return dict(QUIT_ACTION)
            if event.key in (K_RIGHT, K_SPACE):
                return dict(NEXT_ACTION)
            if event.key in (K_LEFT, K_BACKSPACE):
                return dict(PREV_ACTION)

        return None
