from __future__ import annotations

import io
import os
import sys
import time

from src.input.keyboard import QuitWatcher, cbreak_stdin, read_stdin_key


def _scripted_reader(keys: list[str | None]):
    pending = list(keys)

    def read_key(timeout: float) -> str | None:
        if pending:
            return pending.pop(0)
        time.sleep(timeout)
        return None

    return read_key


def test_initially_not_quitting() -> None:
    watcher = QuitWatcher(read_key=_scripted_reader([]))

    assert not watcher.quit_requested
    assert watcher.wait(0.01) is False


def test_quit_keys_set_flag() -> None:
    for key in ("q", "Q"):
        watcher = QuitWatcher(read_key=_scripted_reader([]))
        watcher._handle_key(key)
        assert watcher.quit_requested


def test_other_keys_ignored() -> None:
    watcher = QuitWatcher(read_key=_scripted_reader([]))

    for key in ("a", " ", "\n", "\x1b"):
        watcher._handle_key(key)

    assert not watcher.quit_requested


def test_quit_key_wakes_wait() -> None:
    watcher = QuitWatcher(read_key=_scripted_reader([]))

    watcher._handle_key("q")

    assert watcher.wait(5.0) is True


def test_thread_detects_quit_key() -> None:
    watcher = QuitWatcher(read_key=_scripted_reader(["x", None, "q"]), poll_interval_seconds=0.01)

    watcher.start()
    assert watcher.wait(2.0) is True

    thread = watcher._thread
    assert thread is not None
    deadline = time.time() + 2
    while time.time() < deadline and thread.is_alive():
        time.sleep(0.05)
    assert not thread.is_alive()


def test_start_and_stop_without_quit() -> None:
    watcher = QuitWatcher(read_key=_scripted_reader([]), poll_interval_seconds=0.01)

    watcher.start()
    watcher.stop()

    thread = watcher._thread
    assert thread is not None
    deadline = time.time() + 2
    while time.time() < deadline and thread.is_alive():
        time.sleep(0.05)
    assert not thread.is_alive()
    assert not watcher.quit_requested


def test_stop_joins_reader_thread() -> None:
    watcher = QuitWatcher(read_key=_scripted_reader([]), poll_interval_seconds=0.01)

    watcher.start()
    watcher.stop(timeout=2.0)

    thread = watcher._thread
    assert thread is not None
    assert not thread.is_alive()


def test_reader_error_stops_thread() -> None:
    def broken_reader(timeout: float) -> str | None:
        raise OSError("stdin closed")

    watcher = QuitWatcher(read_key=broken_reader)
    watcher.start()

    thread = watcher._thread
    assert thread is not None
    thread.join(timeout=2)
    assert not thread.is_alive()
    assert not watcher.quit_requested


def test_cbreak_is_noop_for_non_tty() -> None:
    stream = io.StringIO()

    with cbreak_stdin(stream):
        pass


def test_end_of_input_stops_thread() -> None:
    watcher = QuitWatcher(read_key=_scripted_reader([""]), poll_interval_seconds=0.01)
    watcher.start()

    thread = watcher._thread
    assert thread is not None
    thread.join(timeout=2)
    assert not thread.is_alive()
    assert not watcher.quit_requested


def test_devnull_stdin_read_once(monkeypatch) -> None:
    reads = []

    def counting_reader(timeout: float) -> str | None:
        key = read_stdin_key(timeout)
        reads.append(key)
        return key

    with open(os.devnull) as devnull:
        monkeypatch.setattr(sys, "stdin", devnull)
        watcher = QuitWatcher(read_key=counting_reader, poll_interval_seconds=0.05)
        watcher.start()

        thread = watcher._thread
        assert thread is not None
        thread.join(timeout=1)

    assert not thread.is_alive()
    assert reads == [""]
    assert not watcher.quit_requested
