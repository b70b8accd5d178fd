"""Tick loop and command-line entry point for the terminal analog clock."""

from __future__ import annotations

import argparse
from dataclasses import replace
from datetime import datetime
import logging
import sys
from typing import Callable, Protocol, Sequence

from src.config import AppConfig, default_config, load_config
from src.display import TerminalDisplay
from src.input import QuitWatcher, cbreak_stdin
from src.log_setup import configure_logging
from src.logic.geometry import CanvasSize, InvalidInputError, TimeSample
from src.rendering import Frame, compose_frame

logger = logging.getLogger(__name__)


class FrameSink(Protocol):
    def size(self) -> CanvasSize: ...

    def render(self, frame: Frame) -> None: ...


class QuitSignal(Protocol):
    @property
    def quit_requested(self) -> bool: ...

    def wait(self, timeout: float) -> bool: ...


class ClockApp:
    """Samples time and terminal size each tick and hands frames to the display."""

    def __init__(
        self,
        display: FrameSink,
        watcher: QuitSignal,
        color_enabled: bool,
        refresh_interval_seconds: float,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._display = display
        self._watcher = watcher
        self._color_enabled = color_enabled
        self._refresh_interval_seconds = refresh_interval_seconds
        self._now = now
        self._too_small = False

    def tick(self) -> Frame | None:
        """Compose and display one frame; returns None when the input was rejected."""
        try:
            size = self._display.size()
            sample = TimeSample.from_datetime(self._now())
            frame = compose_frame(sample, size, self._color_enabled)
        except InvalidInputError as exc:
            logger.warning("frame_skipped %s", exc)
            return None

        if frame.too_small != self._too_small:
            self._too_small = frame.too_small
            logger.info("too_small=%s size=%sx%s", frame.too_small, frame.width, frame.height)

        self._display.render(frame)
        return frame

    def run(self) -> None:
        """Tick until the watcher reports a quit request."""
        while not self._watcher.quit_requested:
            self.tick()
            if self._watcher.wait(self._refresh_interval_seconds):
                break


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Analog clock for the terminal. Press q to quit.")
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Color the hands, markers and face outline",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML settings file",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between redraws",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else default_config()
    clock = config.clock
    if args.color is not None:
        clock = replace(clock, color=args.color)
    if args.interval is not None:
        if args.interval <= 0:
            raise ValueError(f"--interval must be positive, got {args.interval}")
        clock = replace(clock, refresh_interval_seconds=args.interval)
    return replace(config, clock=clock)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config = _resolve_config(args)
    except ValueError as exc:
        print(f"analog-clock: {exc}", file=sys.stderr)
        return 2

    configure_logging(config.log)
    logger.info(
        "clock_start color=%s interval=%s",
        config.clock.color,
        config.clock.refresh_interval_seconds,
    )

    watcher = QuitWatcher()
    try:
        with cbreak_stdin(), TerminalDisplay() as display:
            watcher.start()
            app = ClockApp(
                display=display,
                watcher=watcher,
                color_enabled=config.clock.color,
                refresh_interval_seconds=config.clock.refresh_interval_seconds,
            )
            try:
                app.run()
            finally:
                # The reader must be gone before stdin leaves cbreak mode.
                watcher.stop()
    except KeyboardInterrupt:
        pass
    finally:
        logger.info("clock_stop")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
