import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestException, ConflictException, DatabaseException
from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "age", "rollnumber", "city")

# SQLSTATE for unique_violation
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the driver reports a unique-constraint violation."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    # sqlite3 has no error codes on IntegrityError
    return "UNIQUE constraint failed" in str(orig)


def validate_required_fields(student: StudentCreate) -> None:
    # Falsy values count as missing, so age=0 is rejected too
    if not all(getattr(student, field) for field in REQUIRED_FIELDS):
        raise BadRequestException(
            "All fields required: " + ", ".join(REQUIRED_FIELDS)
        )


def get_students(db: Session) -> List[Student]:
    """All students ordered by roll number"""
    try:
        return db.query(Student).order_by(Student.rollnumber).all()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching students: {e}")
        raise DatabaseException("Error fetching students") from e


def get_student_by_rollnumber(db: Session, rollnumber: str) -> Optional[Student]:
    try:
        return db.query(Student).filter(Student.rollnumber == rollnumber).first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching student {rollnumber}: {e}")
        raise DatabaseException("Error fetching student") from e


def create_student(db: Session, student: StudentCreate) -> Student:
    """
    Insert a new student.

    Raises BadRequestException before touching the database if a field is
    missing, ConflictException if the roll number is taken.
    """
    validate_required_fields(student)

    db_student = Student(
        name=student.name,
        age=student.age,
        rollnumber=student.rollnumber,
        city=student.city
    )
    try:
        db.add(db_student)
        db.commit()
        db.refresh(db_student)
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Error creating student {student.rollnumber}: {e.orig}")
        if is_unique_violation(e):
            raise ConflictException("Roll number already exists") from e
        raise DatabaseException("Error creating student") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating student {student.rollnumber}: {e}")
        raise DatabaseException("Error creating student") from e
    return db_student


def update_student(db: Session, rollnumber: str, student: StudentUpdate) -> Optional[Student]:
    """
    Merge the provided fields into the stored student.

    Returns None if no student has this roll number.
    """
    changes = student.model_dump(exclude_none=True)
    try:
        db_student = db.query(Student).filter(Student.rollnumber == rollnumber).first()
        if db_student is None:
            return None
        for field, value in changes.items():
            setattr(db_student, field, value)
        db.commit()
        db.refresh(db_student)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating student {rollnumber}: {e}")
        raise DatabaseException("Error updating student") from e
    return db_student


def delete_student(db: Session, rollnumber: str) -> Optional[Student]:
    """Delete and return the student, or None if it doesn't exist"""
    try:
        db_student = db.query(Student).filter(Student.rollnumber == rollnumber).first()
        if db_student is None:
            return None
        db.delete(db_student)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting student {rollnumber}: {e}")
        raise DatabaseException("Error deleting student") from e
    return db_student
