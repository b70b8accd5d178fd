"""Rendering utilities for the terminal clock face."""

from src.rendering.composer import compose_frame, render, render_too_small
from src.rendering.emulator import frame_to_image, save_frame
from src.rendering.frame_data import Cell, Frame

__all__ = [
    "Cell",
    "Frame",
    "compose_frame",
    "frame_to_image",
    "render",
    "render_too_small",
    "save_frame",
]
