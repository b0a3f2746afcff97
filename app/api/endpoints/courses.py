from typing import Any, Dict, List
import logging

from fastapi import APIRouter, Body, Depends, Response, status
from google.cloud.firestore import Client as FirestoreClient

from app.core.exceptions import InternalError, StorageFailure, ValidationError
from app.core.firebase_connector import get_firestore_client
from app.crud import crud_firestore
from app.models.firestore_models import COURSES_COLLECTION, Course

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Course)
def add_course(course: Course, db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    """Create a course. Code, name and instructor are mandatory."""
    if course.missing_fields("course_code", "course_name", "course_instructor"):
        logging.warning("Add course request failed validation: %s", course)
        raise ValidationError("Course code, name, and instructor are required.")
    try:
        created = crud_firestore.create_record(db, COURSES_COLLECTION, course)
    except StorageFailure as e:
        raise InternalError("Failed to add course. Please try again later.") from e
    logging.info("Course added successfully: ID=%s, Code=%s", created.id, created.course_code)
    return created


@router.get("", response_model=List[Course])
def read_courses(db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    """Retrieve every course from Firestore"""
    try:
        return crud_firestore.list_records(db, COURSES_COLLECTION, Course)
    except StorageFailure as e:
        raise InternalError("Failed to retrieve courses. Please try again later.") from e


@router.put("/{course_id}")
def update_course(
    course_id: str,
    updated_data: Dict[str, Any] = Body(...),
    db: FirestoreClient = Depends(get_firestore_client),
) -> Any:
    if not updated_data:
        raise ValidationError("Update data cannot be empty.")
    try:
        crud_firestore.update_record(db, COURSES_COLLECTION, course_id, updated_data)
    except StorageFailure as e:
        raise InternalError("Failed to update course. Please try again later.") from e
    return {"message": "Course updated successfully", "id": course_id}


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: str, db: FirestoreClient = Depends(get_firestore_client)) -> Response:
    try:
        crud_firestore.delete_record(db, COURSES_COLLECTION, course_id)
    except StorageFailure as e:
        raise InternalError("Failed to delete course. Please try again later.") from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
