from dataclasses import dataclass, field
from typing import Optional, Tuple


class CellValue:
    """Matrix cell markers"""
    START = 2
    END = 1
    FREE = 0
    WALL = -1

    ALL = (START, END, FREE, WALL)


@dataclass(frozen=True)
class Point:
    """Coordinate pair, None means unresolved"""
    row: Optional[int] = None
    column: Optional[int] = None

    def as_tuple(self) -> Tuple[Optional[int], Optional[int]]:
        return (self.row, self.column)


@dataclass(frozen=True)
class Field:
    """Graph node built from one matrix cell"""
    row: int
    column: int
    passable: bool
    index: int

    @property
    def point(self) -> Point:
        return Point(self.row, self.column)


@dataclass(frozen=True)
class Graph:
    fields: Tuple[Field, ...] = field(default_factory=tuple) # row-major
    adjacency: Tuple[Tuple[int, ...], ...] = field(default_factory=tuple) # field index -> neighbour indices

    def neighbours(self, index: int) -> Tuple[int, ...]:
        return self.adjacency[index]

    def is_adjacent(self, a: int, b: int) -> bool:
        return b in self.adjacency[a]

    def __len__(self) -> int:
        return len(self.fields)
