from app.routers.generic_crud import CRUDBase
from app.models.academic import Room

class RoomRepository(CRUDBase):
    def __init__(self):
        super().__init__(Room)

room_repository = RoomRepository()
