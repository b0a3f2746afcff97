"""
Result disputes raised by students. Only creation and listing are exposed;
the status is never transitioned here.
"""
from typing import Any, List
import logging

from fastapi import APIRouter, Depends, status
from google.cloud.firestore import Client as FirestoreClient

from app.core.exceptions import InternalError, StorageFailure, ValidationError
from app.core.firebase_connector import get_firestore_client
from app.crud import crud_firestore
from app.models.firestore_models import DISPUTES_COLLECTION, DISPUTE_PENDING, Dispute

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Dispute)
def add_dispute(dispute: Dispute, db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    if dispute.missing_fields("roll_number", "course_code", "reason"):
        logging.warning("Add dispute request failed validation: %s", dispute)
        raise ValidationError("Roll number, course code, and reason are required.")
    if not dispute.status:
        dispute.status = DISPUTE_PENDING
    try:
        created = crud_firestore.create_record(db, DISPUTES_COLLECTION, dispute)
    except StorageFailure as e:
        raise InternalError("Failed to add dispute.") from e
    logging.info("Dispute added successfully: ID=%s, Roll=%s, Course=%s", created.id, created.roll_number, created.course_code)
    return created


@router.get("", response_model=List[Dispute])
def get_all_disputes(db: FirestoreClient = Depends(get_firestore_client)) -> Any:
    try:
        return crud_firestore.list_records(db, DISPUTES_COLLECTION, Dispute)
    except StorageFailure as e:
        raise InternalError("Failed to retrieve disputes.") from e
