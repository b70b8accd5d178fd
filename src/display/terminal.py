"""Terminal output driver built on Rich Live."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.live import Live
from rich.text import Text

from src.logic.geometry import CanvasSize
from src.rendering.frame_data import Frame

logger = logging.getLogger(__name__)


def frame_to_text(frame: Frame) -> Text:
    """Convert a frame into Rich text, styling each colored cell."""
    text = Text(no_wrap=True, overflow="crop")
    for row_index, row in enumerate(frame.rows):
        if row_index:
            text.append("\n")
        for cell in row:
            text.append(cell.glyph, style=cell.color or "")
    return text


class TerminalDisplay:
    """Full-screen repaint of frames on the alternate screen."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._live: Live | None = None
        self._last_size: CanvasSize | None = None

    def size(self) -> CanvasSize:
        """Return the live terminal size."""
        width, height = self._console.size
        size = CanvasSize(width=width, height=height)
        if size != self._last_size:
            logger.info("terminal_size %sx%s", size.width, size.height)
            self._last_size = size
        return size

    def start(self) -> None:
        if self._live is not None:
            return
        self._live = Live(
            console=self._console,
            screen=True,
            auto_refresh=False,
            transient=True,
        )
        self._live.start()

    def stop(self) -> None:
        if self._live is None:
            return
        self._live.stop()
        self._live = None

    def render(self, frame: Frame) -> None:
        """Replace the screen contents with the frame."""
        if self._live is None:
            raise RuntimeError("TerminalDisplay.render() called before start().")
        self._live.update(frame_to_text(frame), refresh=True)

    def __enter__(self) -> TerminalDisplay:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


__all__ = ["TerminalDisplay", "frame_to_text"]
