"""
Course results (marks and grade per roll number).
"""
from typing import Any, List
import logging

from fastapi import APIRouter, Depends, Response, status
from google.cloud.firestore import Client as FirestoreClient

from app.core.exceptions import InternalError, StorageFailure, ValidationError
from app.core.firebase_connector import get_firestore_client
from app.crud import crud_firestore
from app.models.firestore_models import RESULTS_COLLECTION, Result

router = APIRouter()


def _is_valid(result: Result) -> bool:
    # An omitted mark counts as 0
    if result.marks is None:
        result.marks = 0
    if result.missing_fields("roll_number", "course_code", "grade"):
        return False
    return result.marks >= 0


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Result)
def add_result(result: Result, db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    if not _is_valid(result):
        logging.warning("Add result request failed validation: %s", result)
        raise ValidationError("Roll number, course code, grade, and non-negative marks are required.")
    try:
        created = crud_firestore.create_record(db, RESULTS_COLLECTION, result)
    except StorageFailure as e:
        raise InternalError("Failed to add result.") from e
    logging.info("Result added successfully: ID=%s, Roll=%s, Course=%s", created.id, created.roll_number, created.course_code)
    return created


@router.get("", response_model=List[Result])
def get_all_results(db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    try:
        return crud_firestore.list_records(db, RESULTS_COLLECTION, Result)
    except StorageFailure as e:
        raise InternalError("Failed to retrieve results.") from e


@router.delete("/{result_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_result(result_id: str, db: FirestoreClient = Depends(get_firestore_client)) -> Response:
    try:
        crud_firestore.delete_record(db, RESULTS_COLLECTION, result_id)
    except StorageFailure as e:
        raise InternalError("Failed to delete result.") from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
