"""Clock geometry: hand angles, face outline and marker positions on a character grid."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import math
from typing import Iterator

TAU = 2 * math.pi

# A terminal cell is roughly twice as tall as it is wide, so one row covers
# the same distance as two columns.
ASPECT = 0.5
MARGIN = 2

MIN_WIDTH = 30
MIN_HEIGHT = 15
MIN_WIDTH_FOR_ROMAN = 60

MARKER_RADIUS_RATIO = 0.88
OUTLINE_TOLERANCE = 1.0

HOUR = "HOUR"
MINUTE = "MINUTE"
SECOND = "SECOND"

HAND_LENGTHS = {
    HOUR: 0.5,
    MINUTE: 0.8,
    SECOND: 0.9,
}

_ROMAN_VALUES = (
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


class InvalidInputError(ValueError):
    """Raised when a time sample or canvas size is outside the accepted range."""


@dataclass(frozen=True)
class TimeSample:
    """Wall-clock time for a single frame."""

    hour: int
    minute: int
    second: int
    fraction: float = 0.0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise InvalidInputError(f"Hour must be in 0..23, got {self.hour}.")
        if not 0 <= self.minute <= 59:
            raise InvalidInputError(f"Minute must be in 0..59, got {self.minute}.")
        if not 0 <= self.second <= 59:
            raise InvalidInputError(f"Second must be in 0..59, got {self.second}.")
        if not 0.0 <= self.fraction < 1.0:
            raise InvalidInputError(f"Fraction must be in [0.0, 1.0), got {self.fraction}.")

    @classmethod
    def from_datetime(cls, value: datetime) -> TimeSample:
        return cls(
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            fraction=value.microsecond / 1_000_000,
        )


@dataclass(frozen=True)
class CanvasSize:
    """Drawable terminal area in columns and rows."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidInputError(
                f"Canvas dimensions must be positive, got {self.width}x{self.height}."
            )

    @property
    def is_undersized(self) -> bool:
        return self.width < MIN_WIDTH or self.height < MIN_HEIGHT

    @property
    def show_roman(self) -> bool:
        return self.width >= MIN_WIDTH_FOR_ROMAN

    @property
    def center(self) -> tuple[int, int]:
        return self.width // 2, self.height // 2


@dataclass(frozen=True)
class Point:
    """Grid offset from the clock center; y grows downward."""

    x: int
    y: int


@dataclass(frozen=True)
class HandVector:
    """Pose of a single hand."""

    kind: str
    angle: float
    length: float


@dataclass(frozen=True)
class ClockHands:
    """The three hands, iterated in paint order."""

    hour: HandVector
    minute: HandVector
    second: HandVector

    def __iter__(self) -> Iterator[HandVector]:
        return iter((self.hour, self.minute, self.second))


@dataclass(frozen=True)
class HourMarker:
    """Label for one hour position on the face."""

    point: Point
    glyph: str


def to_roman(number: int) -> str:
    """Format 1..39 as a Roman numeral using subtractive notation."""
    if not 1 <= number <= 39:
        raise ValueError(f"Roman numerals are only produced for 1..39, got {number}.")
    parts = []
    remaining = number
    for value, symbol in _ROMAN_VALUES:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value
    return "".join(parts)


def hand_angles(sample: TimeSample) -> tuple[float, float, float]:
    """Return (hour, minute, second) angles in radians clockwise from 12."""
    second_angle = TAU * (sample.second + sample.fraction) / 60
    minute_angle = TAU * (sample.minute + sample.second / 60) / 60
    hour_angle = TAU * (sample.hour % 12 + sample.minute / 60) / 12
    return hour_angle, minute_angle, second_angle


def compute_radius(size: CanvasSize) -> int:
    """Largest face radius, in columns, that fits the canvas with a margin."""
    span = min(size.width, size.height / ASPECT)
    return max(int(span // 2) - MARGIN, 1)


def compute_hands(sample: TimeSample, size: CanvasSize) -> ClockHands:
    """Compute the pose of every hand for one frame.

    Angles depend only on the time sample; lengths are fractions of the radius
    that `hand_endpoint` later derives from the same canvas.
    """
    hour_angle, minute_angle, second_angle = hand_angles(sample)
    return ClockHands(
        hour=HandVector(HOUR, hour_angle, HAND_LENGTHS[HOUR]),
        minute=HandVector(MINUTE, minute_angle, HAND_LENGTHS[MINUTE]),
        second=HandVector(SECOND, second_angle, HAND_LENGTHS[SECOND]),
    )


def _polar_to_point(angle: float, distance: float) -> Point:
    return Point(
        x=round(math.sin(angle) * distance),
        y=round(-math.cos(angle) * distance * ASPECT),
    )


def hand_endpoint(hand: HandVector, size: CanvasSize) -> Point:
    return _polar_to_point(hand.angle, hand.length * compute_radius(size))


def rasterize_line(start: Point, end: Point) -> list[Point]:
    """Integer Bresenham line from start to end, both ends included."""
    dx = abs(end.x - start.x)
    dy = -abs(end.y - start.y)
    step_x = 1 if start.x < end.x else -1
    step_y = 1 if start.y < end.y else -1
    err = dx + dy
    x, y = start.x, start.y

    points = []
    while True:
        points.append(Point(x, y))
        if x == end.x and y == end.y:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += step_x
        if e2 <= dx:
            err += dx
            y += step_y
    return points


def hand_path(hand: HandVector, size: CanvasSize) -> list[Point]:
    return rasterize_line(Point(0, 0), hand_endpoint(hand, size))


def compute_face_outline(size: CanvasSize) -> list[Point]:
    """Cells within the outline tolerance of the aspect-corrected circle, row-major."""
    radius = compute_radius(size)
    cx, cy = size.center
    points = []
    for row in range(size.height):
        dy = (row - cy) / ASPECT
        for col in range(size.width):
            dx = col - cx
            if abs(math.hypot(dx, dy) - radius) < OUTLINE_TOLERANCE:
                points.append(Point(dx, row - cy))
    return points


def compute_hour_markers(size: CanvasSize) -> list[HourMarker]:
    """Twelve hour labels, starting at 12 o'clock and going clockwise."""
    distance = compute_radius(size) * MARKER_RADIUS_RATIO
    markers = []
    for index in range(12):
        hour = index or 12
        glyph = to_roman(hour) if size.show_roman else str(hour)
        markers.append(HourMarker(_polar_to_point(index * TAU / 12, distance), glyph))
    return markers


__all__ = [
    "ASPECT",
    "ClockHands",
    "CanvasSize",
    "HAND_LENGTHS",
    "HOUR",
    "HandVector",
    "HourMarker",
    "InvalidInputError",
    "MARGIN",
    "MINUTE",
    "MIN_HEIGHT",
    "MIN_WIDTH",
    "MIN_WIDTH_FOR_ROMAN",
    "Point",
    "SECOND",
    "TAU",
    "TimeSample",
    "compute_face_outline",
    "compute_hands",
    "compute_hour_markers",
    "compute_radius",
    "hand_angles",
    "hand_endpoint",
    "hand_path",
    "rasterize_line",
    "to_roman",
]
