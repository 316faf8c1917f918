import logging

from fastapi import HTTPException
from typing import Optional

from app.core.config import settings
from app.core.errors import InvalidRingCountError
from app.schemas import RingsResponse
from app.solvers import solve_rings

logger = logging.getLogger(__name__)


class RingsServices:

    def __init__(self, max_ring_count: Optional[int] = None):
        self.max_ring_count = settings.MAX_RING_COUNT if max_ring_count is None else max_ring_count

    def solve(self, ring_count: int) -> RingsResponse:
        """Canonical state sequence for the given number of rings"""
        try:
            if ring_count > self.max_ring_count:
                raise InvalidRingCountError(
                    ring_count, f"ring count exceeds limit of {self.max_ring_count}"
                )
            states = solve_rings(ring_count)
        except InvalidRingCountError as e:
            logger.warning("Rejected ring count: %s", e)
            raise HTTPException(status_code=422, detail=str(e))

        logger.info("Solved %d rings in %d moves", ring_count, len(states) - 1)
        return RingsResponse(moves=len(states) - 1, states=states)
