from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SampleCell:
    character: str
    color: tuple[int, int, int]


@dataclass(frozen=True)
class CellGrid:
    rows: tuple[tuple[SampleCell, ...], ...]  # row-major, top to bottom

    def __post_init__(self):
        if self.rows and len({len(row) for row in self.rows}) != 1:
            raise ValueError("All grid rows must have the same length")

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def chars(self) -> list[str]:
        """One string per row."""
        return ["".join(cell.character for cell in row) for row in self.rows]
