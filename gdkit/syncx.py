"""Synchronisation helpers."""

import threading


class Once:
    """Runs a callable at most once, until :meth:`reset` is called."""

    def __init__(self):
        self._lock = threading.Lock()
        self._done = False

    def do(self, fn):
        """Call ``fn`` unless a previous call already ran since the last reset."""
        if self._done:
            return
        with self._lock:
            if self._done:
                return
            try:
                fn()
            finally:
                self._done = True

    def reset(self):
        """Allow the next call to :meth:`do` to run its callable again."""
        with self._lock:
            self._done = False