import json
import re
import threading
from concurrent import futures
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import shared

_LEADING_INT = re.compile(r"\s*\+?(\d+)")


def parse_high_score(raw):
    """
    Turn a persisted value into a high score, or None if it is unusable.

    Strings are read like a browser's parseInt ("12abc" -> 12). Negative
    numbers, booleans and anything else count as absent.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    if isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        return int(m.group(1)) if m else None
    return None


class JsonFileStore:
    """High-score store backed by a small JSON object file: {key: value}."""

    def __init__(self, path, key=shared.CONSTANTS['HIGH_SCORE_KEY']):
        self.path = Path(path).expanduser()
        self.key = key
        self._lock = threading.Lock()

    def _load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError):
            return {}
        return data if isinstance(data, dict) else {}

    def read(self):
        return parse_high_score(self._load().get(self.key))

    def write(self, value):
        with self._lock:
            data = self._load()
            data[self.key] = int(value)
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "w", encoding="utf-8") as f:
                    json.dump(data, f)
            except OSError:
                # In-memory high score stays authoritative
                pass


class ScoreTracker:
    def __init__(self, store):
        self.store = store
        self.high_score = self._read_once()
        # One worker keeps writes in the order the scores were reached
        self._writer = ThreadPoolExecutor(max_workers=1, thread_name_prefix="high-score")
        self._writes = []
        self._lock = threading.Lock()

    def _read_once(self):
        try:
            value = parse_high_score(self.store.read())
        except Exception:
            # Store trouble is never fatal, the best score just starts at 0
            value = None
        return value or 0

    def on_pipe_passed(self, score):
        return score + 1

    def on_session_end(self, score, high_score):
        """Return the high score after a session ended with `score`."""
        if score <= high_score:
            return high_score
        self.high_score = score
        self._persist(score)
        return score

    def _write(self, value):
        if value < self.high_score:
            # A newer best is already queued behind this one
            return
        try:
            self.store.write(value)
        except Exception:
            pass

    def _persist(self, value):
        # Fire and forget, the simulation never waits on the store
        future = self._writer.submit(self._write, value)
        with self._lock:
            self._writes = [f for f in self._writes if not f.done()]
            self._writes.append(future)

    def wait(self, timeout=None):
        with self._lock:
            writes = list(self._writes)
        futures.wait(writes, timeout=timeout)
