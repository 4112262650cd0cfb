from sqlalchemy import Column, String, Integer, Text, Date, Enum

from app.models.base import BaseModel
import enum


class RoomType(enum.Enum):
    CLASSROOM = "classroom"
    COMPUTER_LAB = "computer_lab"
    MEETING_ROOM = "meeting_room"
    AUDITORIUM = "auditorium"
    LIBRARY = "library"


class Room(BaseModel):
    __tablename__ = "rooms"

    name = Column(String(100), nullable=False, unique=True)
    capacity = Column(Integer)
    location = Column(String(255))
    room_type = Column(Enum(RoomType, values_callable=lambda obj: [e.value for e in obj],
                            name="room_type"),
                       default=RoomType.CLASSROOM)
    notes = Column(Text)

    def __repr__(self):
        return f"<Room(id={self.id}, name='{self.name}')>"


class Student(BaseModel):
    __tablename__ = "students"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True)
    phone = Column(String(20))
    date_of_birth = Column(Date)

    def __repr__(self):
        return f"<Student(id={self.id}, name='{self.first_name} {self.last_name}')>"
