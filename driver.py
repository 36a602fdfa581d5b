import threading
import time

import shared
from utils import GameState


def now_ms():
    return time.time() * 1000


class JumpLatch:
    """
    Hand-off point between input threads and the frame loop.

    Any number of triggers between two consume() calls count as one jump.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pending = False

    def trigger(self, *_):
        with self._lock:
            self._pending = True

    def consume(self):
        with self._lock:
            pending = self._pending
            self._pending = False
        return pending


class Ticker:
    def __init__(self, fps=None, max_catch_up=5):
        self.fps = fps or shared.CONSTANTS['FPS']
        self.frame_time_ms = 1000 / self.fps
        self.max_catch_up = max_catch_up
        self.active = False
        self.last_t = None

    def resume(self, time_now=None):
        if self.active:
            return
        self.active = True
        self.last_t = time_now if time_now is not None else now_ms()

    def suspend(self):
        self.active = False
        self.last_t = None

    def due(self, time_now=None):
        """Number of whole ticks owed since the last call."""
        if not self.active:
            return 0
        now = time_now if time_now is not None else now_ms()
        if self.last_t is None:
            self.last_t = now
            return 0

        frames_to_step = int((now - self.last_t) / self.frame_time_ms)
        self.last_t += frames_to_step * self.frame_time_ms
        if frames_to_step > self.max_catch_up:
            # Drop the backlog instead of fast-forwarding through it
            self.last_t = now
            frames_to_step = self.max_catch_up
        return frames_to_step


class GameDriver:
    """Serializes input and ticks onto the thread that calls pump()."""

    def __init__(self, game, ticker=None, latch=None):
        self.game = game
        self.ticker = ticker or Ticker()
        self.latch = latch or JumpLatch()
        self._time_now = None
        game.on_state_change = self._on_state_change

    def _on_state_change(self, prev, state):
        if state is GameState.PLAYING:
            self.ticker.resume(self._time_now)
        else:
            self.ticker.suspend()

    def pump(self, time_now=None):
        self._time_now = time_now if time_now is not None else now_ms()
        if self.latch.consume():
            self.game.press_jump()

        for _ in range(self.ticker.due(self._time_now)):
            self.game.step()
            if self.game.state is not GameState.PLAYING:
                break
        return self.game.snapshot()
