from sqlalchemy import Column, DateTime, Integer, String, func
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=False)
    rollnumber = Column(String(50), unique=True, nullable=False)
    city = Column(String(100), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
