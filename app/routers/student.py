from app.core.database import get_db
from app.models.academic import Student
from app.repositories.student import student_repository
from app.routers.generator import create_crud_router

router = create_crud_router(
    model=Student,
    db_dependency=get_db,
    crud=student_repository,
    tag_prefix="Students"
)
