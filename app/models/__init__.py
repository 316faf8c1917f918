from app.models.grid_model import CellValue, Point, Field, Graph
