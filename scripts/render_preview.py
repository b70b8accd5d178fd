"""Render a single clock frame for a fixed time and canvas size."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src.logic.geometry import CanvasSize, InvalidInputError, TimeSample
from src.rendering import compose_frame, frame_to_image, save_frame


def _parse_time(value: str) -> TimeSample:
    parts = value.split(":")
    if len(parts) != 3:
        raise ValueError(f"Expected HH:MM:SS[.fff], got {value!r}")
    hour, minute = int(parts[0]), int(parts[1])
    seconds = float(parts[2])
    whole = int(seconds)
    return TimeSample(hour=hour, minute=minute, second=whole, fraction=seconds - whole)


def _parse_size(value: str) -> CanvasSize:
    width, sep, height = value.lower().partition("x")
    if not sep:
        raise ValueError(f"Expected WIDTHxHEIGHT, got {value!r}")
    return CanvasSize(width=int(width), height=int(height))


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("time", help="Time as HH:MM:SS or HH:MM:SS.fff")
    parser.add_argument("--size", default="80x24", help="Canvas as WIDTHxHEIGHT")
    parser.add_argument("--color", action="store_true", help="Use per-element colors")
    parser.add_argument("--output", default=None, help="Also write a PNG snapshot here")
    args = parser.parse_args()

    try:
        sample = _parse_time(args.time)
        size = _parse_size(args.size)
    except (ValueError, InvalidInputError) as exc:
        raise SystemExit(str(exc))

    frame = compose_frame(sample, size, args.color)
    print(frame.to_text())
    if args.output:
        save_frame(frame_to_image(frame), args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
