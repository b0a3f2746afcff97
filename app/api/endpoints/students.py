"""
Student records: create, list, fetch, partial update and delete.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status
from google.cloud.firestore import Client as FirestoreClient

from app.core.exceptions import InternalError, NotFound, StorageFailure, ValidationError
from app.core.firebase_connector import get_firestore_client
from app.crud import crud_firestore
from app.models.firestore_models import STUDENTS_COLLECTION, Student

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Student)
def add_student(student: Student, db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    if student.missing_fields("roll_number", "name", "email"):
        logging.warning("Add student request failed validation: %s", student)
        raise ValidationError("Roll number, name, and email are required.")
    try:
        created = crud_firestore.create_record(db, STUDENTS_COLLECTION, student)
    except StorageFailure as e:
        raise InternalError("Failed to add student. Please try again later.") from e
    logging.info("Student added successfully: ID=%s, Roll=%s", created.id, created.roll_number)
    return created


@router.get("", response_model=List[Student])
def get_all_students(db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    try:
        return crud_firestore.list_records(db, STUDENTS_COLLECTION, Student)
    except StorageFailure as e:
        raise InternalError("Failed to retrieve students. Please try again later.") from e


@router.get("/{student_id}", response_model=Student)
def get_student(student_id: str, db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    try:
        student = crud_firestore.get_record(db, STUDENTS_COLLECTION, Student, student_id)
    except StorageFailure as e:
        raise InternalError("Failed to retrieve student. Please try again later.") from e
    if student is None:
        logging.warning("Student not found with ID: %s", student_id)
        raise NotFound(f"Student not found with ID: {student_id}")
    return student


@router.put("/{student_id}")
def update_student(
    student_id: str,
    updated_data: Dict[str, Any] = Body(...),
    db: FirestoreClient = Depends(get_firestore_client),
) -> Any:
    """Partial update; only the supplied fields change and `id` is ignored."""
    if not updated_data:
        raise ValidationError("Update data cannot be empty.")
    try:
        crud_firestore.update_record(db, STUDENTS_COLLECTION, student_id, updated_data)
    except StorageFailure as e:
        raise InternalError("Failed to update student. Please try again later.") from e
    return {"message": "Student updated successfully", "id": student_id}


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: str, db: FirestoreClient = Depends(get_firestore_client)) -> Response:
    try:
        crud_firestore.delete_record(db, STUDENTS_COLLECTION, student_id)
    except StorageFailure as e:
        raise InternalError("Failed to delete student. Please try again later.") from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
