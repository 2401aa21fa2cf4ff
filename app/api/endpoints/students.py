from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.api.deps import get_db
from app.core.exceptions import NotFoundException
from app.services.student import student as crud_student
from app.schemas.student import (
    ErrorResponse,
    StudentCreate,
    StudentListResponse,
    StudentResponse,
    StudentUpdate,
)

router = APIRouter()

NOT_FOUND_MESSAGE = "Student not found"


@router.get("", response_model=StudentListResponse)
def get_students(db: Session = Depends(get_db)):
    """
    All students, ordered by roll number.
    """
    students = crud_student.get_students(db)
    return {"success": True, "data": students, "count": len(students)}


@router.get(
    "/{rollnumber}",
    response_model=StudentResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def get_student(rollnumber: str, db: Session = Depends(get_db)):
    student = crud_student.get_student_by_rollnumber(db, rollnumber=rollnumber)
    if student is None:
        raise NotFoundException(NOT_FOUND_MESSAGE)
    return {"success": True, "data": student}


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_student(student: Optional[StudentCreate] = None, db: Session = Depends(get_db)):
    """
    Create a new student

    Required:
    - **name**
    - **age**
    - **rollnumber**: must be unique
    - **city**
    """
    created = crud_student.create_student(db=db, student=student or StudentCreate())
    return {"success": True, "message": "Student created successfully", "data": created}


@router.put(
    "/{rollnumber}",
    response_model=StudentResponse,
    responses={404: {"model": ErrorResponse}},
)
def update_student(rollnumber: str, student: Optional[StudentUpdate] = None, db: Session = Depends(get_db)):
    """
    Update name, age and/or city. Fields left out keep their current value;
    the roll number itself cannot be changed.
    """
    updated = crud_student.update_student(
        db=db, rollnumber=rollnumber, student=student or StudentUpdate()
    )
    if updated is None:
        raise NotFoundException(NOT_FOUND_MESSAGE)
    return {"success": True, "message": "Student updated successfully", "data": updated}


@router.delete(
    "/{rollnumber}",
    response_model=StudentResponse,
    responses={404: {"model": ErrorResponse}},
)
def delete_student(rollnumber: str, db: Session = Depends(get_db)):
    deleted = crud_student.delete_student(db=db, rollnumber=rollnumber)
    if deleted is None:
        raise NotFoundException(NOT_FOUND_MESSAGE)
    return {"success": True, "message": "Student deleted successfully", "data": deleted}
