"""
Re-exports of the Firestore record models.
"""
from app.models.firestore_models import (
    FirestoreModel,
    Student,
    Course,
    Lecturer,
    Result,
    Dispute,
)

__all__ = ["FirestoreModel", "Student", "Course", "Lecturer", "Result", "Dispute"]
