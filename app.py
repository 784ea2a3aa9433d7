#!/usr/bin/env python3
"""
app.py – single-window image browser

Shows one image at a time, fitted and centred in a fixed-size window.
Right/left step through the list, Escape closes.  Input is dispatched by
events.py.
"""
from __future__ import annotations

from typing import Optional, Sequence

import config
import console
from events       import EventManager
from navigation   import NavigationController
from renderer     import Window


# ── main application ───────────────────────────────────────────────────────
class ImageViewer:
    def __init__(self,
                 paths: Sequence[str],
                 window: Optional[Window] = None,
                 controller: Optional[NavigationController] = None):
        # window first: a missing display must fail before any decoding
        self.window = window or Window(config.WIDTH, config.HEIGHT)
        self.nav    = controller or NavigationController(
            paths, self.window.width, self.window.height)

    # ── one iteration's worth of input ------------------------------------
    def _apply_actions(self) -> bool:
        """Drain queued actions; at most one navigation per call."""
        navigated = False
        deferred  = []
        while (act := EventManager.poll()):
            t = act["type"]
            if t == "quit":
                return False
            if t == "navigate":
                if navigated:
                    deferred.append(act)    # replayed next frame
                    continue
                if act.get("to") == "prev":
                    self.nav.retreat()
                else:
                    self.nav.advance()
                navigated = True
        for act in deferred:
            EventManager.post(act)
        return True

    # ── main loop ---------------------------------------------------------
    def run(self) -> None:
        self.nav.start()
        running = True
        while running and self.window.is_open:
            self.window.pump()
            running = self._apply_actions()

            self.window.present(self.nav.buffer)
            self.window.tick()

        console.closed()
        self.window.close()
