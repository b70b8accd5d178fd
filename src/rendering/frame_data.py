"""Data structures for rendered frames."""

from __future__ import annotations

from dataclasses import dataclass

BLANK = " "


@dataclass(frozen=True)
class Cell:
    """Single character cell with an optional color tag."""

    glyph: str = BLANK
    color: str | None = None


BLANK_CELL = Cell()


@dataclass(frozen=True)
class Frame:
    """Complete character grid for one tick."""

    width: int
    height: int
    rows: tuple[tuple[Cell, ...], ...]
    too_small: bool = False

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at absolute column x, row y."""
        return self.rows[y][x]

    def lines(self) -> list[str]:
        return ["".join(cell.glyph for cell in row) for row in self.rows]

    def to_text(self) -> str:
        return "\n".join(self.lines())


__all__ = ["BLANK", "BLANK_CELL", "Cell", "Frame"]
