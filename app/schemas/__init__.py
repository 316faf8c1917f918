from app.schemas.labyrinth_schema import PointRead, LabyrinthResponse, EscapeWaysResponse
from app.schemas.rings_schema import RingsResponse
