"""Threaded keyboard watcher that signals when the user asks to quit."""

from __future__ import annotations

from contextlib import contextmanager
import logging
import select
import sys
import threading
from typing import Callable, Iterator, TextIO

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "Q"})

KeyReader = Callable[[float], "str | None"]


def read_stdin_key(timeout: float) -> str | None:
    """Return one pending character from stdin, None after timeout, or "" at end of input."""
    ready, _, _ = select.select([sys.stdin], [], [], timeout)
    if not ready:
        return None
    return sys.stdin.read(1)


@contextmanager
def cbreak_stdin(stream: TextIO | None = None) -> Iterator[None]:
    """Put a tty stream into cbreak mode for the duration of the block."""
    stream = stream or sys.stdin
    if not stream.isatty():
        yield
        return

    import termios
    import tty

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


class QuitWatcher:
    """Background reader that sets a quit flag on q or Q."""

    def __init__(
        self,
        read_key: KeyReader = read_stdin_key,
        poll_interval_seconds: float = 0.05,
    ) -> None:
        self._read_key = read_key
        self._poll_interval_seconds = poll_interval_seconds
        self._quit_event = threading.Event()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def quit_requested(self) -> bool:
        return self._quit_event.is_set()

    def wait(self, timeout: float) -> bool:
        """Sleep up to timeout seconds; return True early if quit was requested."""
        return self._quit_event.wait(timeout=timeout)

    def start(self) -> None:
        """Start the background reader thread."""
        if self._thread and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        """Signal the reader thread to stop and wait for it to finish."""
        self._stop_event.set()
        thread = self._thread
        if thread and thread.is_alive() and thread is not threading.current_thread():
            thread.join(timeout=timeout)

    def _run_loop(self) -> None:
        while not self._stop_event.is_set() and not self._quit_event.is_set():
            try:
                key = self._read_key(self._poll_interval_seconds)
            except (OSError, ValueError) as exc:
                logger.warning("key_reader_failed %s", exc)
                return
            if key == "":
                # Closed pipe or /dev/null: select keeps reporting it readable.
                logger.info("key_reader_eof")
                return
            if key is not None:
                self._handle_key(key)

    def _handle_key(self, key: str) -> None:
        if key in QUIT_KEYS:
            logger.info("quit_requested key=%r", key)
            self._quit_event.set()


__all__ = ["QUIT_KEYS", "QuitWatcher", "cbreak_stdin", "read_stdin_key"]
