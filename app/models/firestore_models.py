"""
Pydantic models for the records stored in Firestore.
Field names are snake_case in Python and camelCase on the wire and in the
stored documents (`rollNumber`, `courseCode`, ...).
"""
from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T", bound="FirestoreModel")

STUDENTS_COLLECTION = "Students"
COURSES_COLLECTION = "Courses"
LECTURERS_COLLECTION = "Lecturers"
RESULTS_COLLECTION = "Results"
DISPUTES_COLLECTION = "Disputes"

DISPUTE_PENDING = "pending"


class FirestoreModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Assigned by the store on create
    id: Optional[str] = None

    @classmethod
    def from_doc(cls: Type[T], doc: Any) -> Optional[T]:
        if doc is None:
            return None
        if hasattr(doc, "to_dict"):
            data = doc.to_dict() or {}
            data["id"] = getattr(doc, "id", None)
        elif isinstance(doc, dict):
            data = dict(doc)
        else:
            return None
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Document body as written to Firestore. The id is embedded."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def missing_fields(self, *fields: str) -> List[str]:
        """Names of the given fields that are None or empty strings."""
        missing = []
        for name in fields:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and value == ""):
                missing.append(name)
        return missing


class Student(FirestoreModel):
    roll_number: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class Course(FirestoreModel):
    course_code: Optional[str] = None
    course_name: Optional[str] = None
    course_instructor: Optional[str] = None


class Lecturer(FirestoreModel):
    lecturer_id: Optional[str] = None
    lecturer_name: Optional[str] = None
    lecturer_email: Optional[str] = None


class Result(FirestoreModel):
    roll_number: Optional[str] = None
    course_code: Optional[str] = None
    marks: Optional[int] = None
    grade: Optional[str] = None


class Dispute(FirestoreModel):
    roll_number: Optional[str] = None
    course_code: Optional[str] = None
    reason: Optional[str] = None
    # pending, resolved or rejected
    status: Optional[str] = None


__all__ = [
    "FirestoreModel",
    "Student",
    "Course",
    "Lecturer",
    "Result",
    "Dispute",
    "STUDENTS_COLLECTION",
    "COURSES_COLLECTION",
    "LECTURERS_COLLECTION",
    "RESULTS_COLLECTION",
    "DISPUTES_COLLECTION",
    "DISPUTE_PENDING",
]
