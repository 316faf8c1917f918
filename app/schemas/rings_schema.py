from pydantic import BaseModel
from typing import List


class RingsResponse(BaseModel):
    moves: int
    states: List[List[bool]]
