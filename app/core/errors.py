from enum import Enum


class GridErrorKind(str, Enum):
    MARKERS = "missing or duplicate start/end marker"
    SHAPE = "non-square or empty matrix"
    CELL_VALUE = "invalid cell value"
    TOO_LARGE = "matrix exceeds size limit"


class SolverError(Exception):
    """Base class for all puzzle engine errors"""


class MalformedGridError(SolverError):
    """Input matrix violates the marker or square-matrix rules"""

    def __init__(self, kind: GridErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)


class NoPathFoundError(SolverError):
    """Start and end are not connected"""

    def __init__(self, message: str = "No path found"):
        super().__init__(message)


class InvalidRingCountError(SolverError):
    def __init__(self, count, detail: str = "ring count must be a positive integer"):
        self.count = count
        super().__init__(f"{detail} (got {count})")
