"""Keyboard input adapters."""

from src.input.keyboard import QuitWatcher, cbreak_stdin

__all__ = ["QuitWatcher", "cbreak_stdin"]
