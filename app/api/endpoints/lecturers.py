from typing import Any, List
import logging

from fastapi import APIRouter, Depends, Response, status
from google.cloud.firestore import Client as FirestoreClient

from app.core.exceptions import InternalError, StorageFailure, ValidationError
from app.core.firebase_connector import get_firestore_client
from app.crud import crud_firestore
from app.models.firestore_models import LECTURERS_COLLECTION, Lecturer

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Lecturer)
def add_lecturer(lecturer: Lecturer, db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    if lecturer.missing_fields("lecturer_id", "lecturer_name", "lecturer_email"):
        logging.warning("Add lecturer request failed validation: %s", lecturer)
        raise ValidationError("Lecturer ID, name, and email are required.")
    try:
        created = crud_firestore.create_record(db, LECTURERS_COLLECTION, lecturer)
    except StorageFailure as e:
        raise InternalError("Failed to add lecturer.") from e
    logging.info("Lecturer added successfully: ID=%s, LecturerID=%s", created.id, created.lecturer_id)
    return created


@router.get("", response_model=List[Lecturer])
def get_all_lecturers(db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    try:
        return crud_firestore.list_records(db, LECTURERS_COLLECTION, Lecturer)
    except StorageFailure as e:
        raise InternalError("Failed to retrieve lecturers.") from e


@router.delete("/{lecturer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lecturer(lecturer_id: str, db: FirestoreClient = Depends(get_firestore_client)) -> Response:
    try:
        crud_firestore.delete_record(db, LECTURERS_COLLECTION, lecturer_id)
    except StorageFailure as e:
        raise InternalError("Failed to delete lecturer.") from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
