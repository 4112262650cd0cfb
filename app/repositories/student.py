from app.routers.generic_crud import CRUDBase
from app.models.academic import Student

class StudentRepository(CRUDBase):
    def __init__(self):
        super().__init__(Student)

student_repository = StudentRepository()
