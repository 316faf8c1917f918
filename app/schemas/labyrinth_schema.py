from pydantic import BaseModel
from typing import List, Optional

from app.models import Point


# x is the row index, y the column index
class PointRead(BaseModel):
    x: Optional[int]
    y: Optional[int]

    @classmethod
    def from_point(cls, point: Point) -> "PointRead":
        return cls(x=point.row, y=point.column)


# Shortest path, listed from end back to start
class LabyrinthResponse(BaseModel):
    length: int
    path: List[PointRead]


# All simple paths, each listed from the field before the end back to start
class EscapeWaysResponse(BaseModel):
    count: int
    paths: List[List[PointRead]]
