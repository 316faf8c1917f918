# import moduls/libraries
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from typing import List

# import form project
from app.schemas import EscapeWaysResponse, LabyrinthResponse, RingsResponse
from app.services import LabyrinthServices, RingsServices


# solver routes are sync so they run in the threadpool
router = APIRouter()


# Chinese rings: body is the bare ring count
@router.post("/chinese_rings", response_model=RingsResponse)
def chinese_rings(ring_count: int = Body(...)):
    """Solve the Chinese rings puzzle"""
    services = RingsServices()
    return services.solve(ring_count)


# Labyrinth: body is the bare matrix
@router.post("/labyrinth", response_model=LabyrinthResponse)
def labyrinth(matrix: List[List[int]] = Body(...)):
    """Shortest path from start to end, listed end first"""
    services = LabyrinthServices()
    return services.shortest_path(matrix)


@router.post("/labyrinth/visualize", response_class=JSONResponse)
def visualize_labyrinth(matrix: List[List[int]] = Body(...)):
    """Get labyrinth and shortest path as Plotly JSON"""
    services = LabyrinthServices()
    return JSONResponse(content=services.visualize(matrix))


# Escape ways: every simple path
@router.post("/escape_ways", response_model=EscapeWaysResponse)
def escape_ways(matrix: List[List[int]] = Body(...)):
    """All simple paths from start to end"""
    services = LabyrinthServices()
    return services.escape_ways(matrix)
