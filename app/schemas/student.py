from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class StudentCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # Presence is checked by the service so that a missing field is a 400, not a 422
    name: Optional[str] = None
    age: Optional[int] = None
    rollnumber: Optional[str] = None
    city: Optional[str] = None


class StudentUpdate(BaseModel):
    """Partial update: a field left out (or null) keeps its stored value."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    age: Optional[int] = None
    city: Optional[str] = None


class Student(BaseModel):
    id: int
    name: str
    age: int
    rollnumber: str
    city: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ============= ENVELOPES =============

class StudentResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Student


class StudentListResponse(BaseModel):
    success: bool = True
    data: List[Student]
    count: int


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
