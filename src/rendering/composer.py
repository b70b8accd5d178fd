"""Frame composer for the terminal clock face."""

from __future__ import annotations

from src.logic.geometry import (
    HOUR,
    MINUTE,
    SECOND,
    CanvasSize,
    ClockHands,
    HourMarker,
    Point,
    TimeSample,
    compute_face_outline,
    compute_hands,
    compute_hour_markers,
    hand_path,
)
from src.rendering.frame_data import BLANK_CELL, Cell, Frame

GLYPH_OUTLINE = "o"
HAND_GLYPHS = {
    HOUR: "#",
    MINUTE: "*",
    SECOND: ".",
}

COLOR_OUTLINE = "cyan"
COLOR_MARKER = "yellow"
HAND_COLORS = {
    HOUR: "green",
    MINUTE: "blue",
    SECOND: "red",
}

TOO_SMALL_MESSAGE = "terminal too small"

Grid = list[list[Cell]]


def _blank_grid(size: CanvasSize) -> Grid:
    return [[BLANK_CELL] * size.width for _ in range(size.height)]


def _freeze(grid: Grid, size: CanvasSize, too_small: bool = False) -> Frame:
    return Frame(
        width=size.width,
        height=size.height,
        rows=tuple(tuple(row) for row in grid),
        too_small=too_small,
    )


def _paint(grid: Grid, size: CanvasSize, point: Point, glyph: str, color: str | None) -> None:
    cx, cy = size.center
    col = cx + point.x
    row = cy + point.y
    if 0 <= row < size.height and 0 <= col < size.width:
        grid[row][col] = Cell(glyph, color)


def _paint_marker(grid: Grid, size: CanvasSize, marker: HourMarker, color: str | None) -> None:
    # Labels are centered on the marker point, rounding toward the left.
    start = marker.point.x - (len(marker.glyph) - 1) // 2
    for offset, char in enumerate(marker.glyph):
        _paint(grid, size, Point(start + offset, marker.point.y), char, color)


def render_too_small(size: CanvasSize) -> Frame:
    """Frame holding only a centered notice that the canvas cannot fit a clock."""
    grid = _blank_grid(size)
    message = TOO_SMALL_MESSAGE[: size.width]
    row = size.height // 2
    left = (size.width - len(message)) // 2
    for offset, char in enumerate(message):
        grid[row][left + offset] = Cell(char)
    return _freeze(grid, size, too_small=True)


def render(
    hands: ClockHands,
    markers: list[HourMarker],
    size: CanvasSize,
    color_enabled: bool,
) -> Frame:
    """Paint the face outline, markers and hands into a fresh frame.

    Later layers overwrite earlier ones, so the second hand always ends up on
    top. Undersized canvases get the "too small" frame instead.
    """
    if size.is_undersized:
        return render_too_small(size)

    grid = _blank_grid(size)

    outline_color = COLOR_OUTLINE if color_enabled else None
    for point in compute_face_outline(size):
        _paint(grid, size, point, GLYPH_OUTLINE, outline_color)

    marker_color = COLOR_MARKER if color_enabled else None
    for marker in markers:
        _paint_marker(grid, size, marker, marker_color)

    for hand in hands:
        glyph = HAND_GLYPHS[hand.kind]
        color = HAND_COLORS[hand.kind] if color_enabled else None
        for point in hand_path(hand, size):
            _paint(grid, size, point, glyph, color)

    return _freeze(grid, size)


def compose_frame(sample: TimeSample, size: CanvasSize, color_enabled: bool = False) -> Frame:
    """Run geometry and rendering for a single tick."""
    hands = compute_hands(sample, size)
    markers = compute_hour_markers(size)
    return render(hands, markers, size, color_enabled)


__all__ = [
    "COLOR_MARKER",
    "COLOR_OUTLINE",
    "GLYPH_OUTLINE",
    "HAND_COLORS",
    "HAND_GLYPHS",
    "TOO_SMALL_MESSAGE",
    "compose_frame",
    "render",
    "render_too_small",
]
