"""Display output adapters."""

from src.display.terminal import TerminalDisplay, frame_to_text

__all__ = ["TerminalDisplay", "frame_to_text"]
