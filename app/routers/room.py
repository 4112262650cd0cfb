from app.core.database import get_db
from app.models.academic import Room
from app.repositories.room import room_repository
from app.routers.generator import create_crud_router

# GET/POST /rooms, GET/PUT/PATCH/DELETE /rooms/{item_id}
router = create_crud_router(
    model=Room,
    db_dependency=get_db,
    crud=room_repository,
    tag_prefix="Rooms"
)
