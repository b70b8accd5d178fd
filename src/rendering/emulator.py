"""PNG snapshots of terminal frames."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from src.rendering.frame_data import BLANK, Frame

CELL_WIDTH = 8
CELL_HEIGHT = 16

COLOR_BACKGROUND = (0, 0, 0)
COLOR_DEFAULT = (204, 204, 204)

PALETTE = {
    "cyan": (0, 205, 205),
    "yellow": (205, 205, 0),
    "green": (0, 205, 0),
    "blue": (59, 120, 255),
    "red": (205, 0, 0),
}


def frame_to_image(frame: Frame) -> Image.Image:
    """Rasterise a frame, one fixed-size cell per character."""
    image = Image.new("RGB", (frame.width * CELL_WIDTH, frame.height * CELL_HEIGHT), COLOR_BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    for row_index, row in enumerate(frame.rows):
        for col_index, cell in enumerate(row):
            if cell.glyph == BLANK:
                continue
            fill = PALETTE.get(cell.color, COLOR_DEFAULT)
            draw.text(
                (col_index * CELL_WIDTH, row_index * CELL_HEIGHT),
                cell.glyph,
                font=font,
                fill=fill,
            )
    return image


def save_frame(image: Image.Image, path: str = "emulator_output/frame.png") -> None:
    """Save a frame to disk as a PNG image."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path, format="PNG")


__all__ = ["CELL_HEIGHT", "CELL_WIDTH", "PALETTE", "frame_to_image", "save_frame"]
