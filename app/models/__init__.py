from .base import Base
from .academic import Room, RoomType, Student
