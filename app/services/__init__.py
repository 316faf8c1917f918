from app.services.labyrinth_services import LabyrinthServices
from app.services.rings_services import RingsServices
