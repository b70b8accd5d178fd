from __future__ import annotations

from PIL import Image

from src.logic.geometry import CanvasSize, TimeSample
from src.rendering import compose_frame, frame_to_image, save_frame
from src.rendering.emulator import CELL_HEIGHT, CELL_WIDTH


def _cell_box(col: int, row: int) -> tuple[int, int, int, int]:
    left = col * CELL_WIDTH
    top = row * CELL_HEIGHT
    return (left, top, left + CELL_WIDTH, top + CELL_HEIGHT)


def test_frame_to_image_size_and_mode() -> None:
    frame = compose_frame(TimeSample(10, 10, 30), CanvasSize(80, 24))
    image = frame_to_image(frame)

    assert isinstance(image, Image.Image)
    assert image.size == (80 * CELL_WIDTH, 24 * CELL_HEIGHT)
    assert image.mode == "RGB"


def test_blank_cells_stay_black() -> None:
    frame = compose_frame(TimeSample(10, 10, 30), CanvasSize(80, 24), color_enabled=True)
    image = frame_to_image(frame)

    assert image.crop(_cell_box(0, 0)).getbbox() is None


def test_painted_cells_have_ink() -> None:
    frame = compose_frame(TimeSample(3, 0, 30), CanvasSize(80, 24), color_enabled=True)
    image = frame_to_image(frame)

    # Hour hand cell at 3 o'clock, halfway out.
    assert image.crop(_cell_box(45, 12)).getbbox() is not None


def test_save_frame_creates_parent_dirs(tmp_path) -> None:
    frame = compose_frame(TimeSample(1, 2, 3), CanvasSize(30, 15))
    path = tmp_path / "nested" / "frame.png"

    save_frame(frame_to_image(frame), str(path))

    assert path.exists()
    with Image.open(path) as saved:
        assert saved.size == (30 * CELL_WIDTH, 15 * CELL_HEIGHT)
