"""
CRUD helpers over Firestore collections, shared by every resource router.

All functions take the Firestore client as first argument. Any error raised by
the client is logged and re-raised as `StorageFailure`.
"""
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from google.cloud.firestore import Client as FirestoreClient

from app.core.exceptions import StorageFailure
from app.models.firestore_models import FirestoreModel

T = TypeVar("T", bound=FirestoreModel)


def create_record(db: FirestoreClient, collection: str, record: T) -> T:
    """Writes a new document and returns the record carrying its generated id.

    The id is allocated before the write and embedded in the stored document;
    any id supplied by the caller is replaced.
    """
    try:
        ref = db.collection(collection).document()
        record.id = ref.id
        ref.set(record.to_dict())
    except Exception as e:
        logging.exception("Failed to add document to %s", collection)
        raise StorageFailure(f"Failed to write to {collection}") from e
    logging.info("Added %s document %s", collection, record.id)
    return record


def get_record(db: FirestoreClient, collection: str, model: Type[T], doc_id: str) -> Optional[T]:
    try:
        doc = db.collection(collection).document(str(doc_id)).get()
    except Exception as e:
        logging.exception("Failed to read %s/%s", collection, doc_id)
        raise StorageFailure(f"Failed to read from {collection}") from e
    if not doc.exists:
        return None
    return model.from_doc(doc)


def list_records(db: FirestoreClient, collection: str, model: Type[T]) -> List[T]:
    """Full collection scan, in store order."""
    try:
        docs = list(db.collection(collection).stream())
    except Exception as e:
        logging.exception("Failed to list %s", collection)
        raise StorageFailure(f"Failed to read from {collection}") from e
    records = [model.from_doc(d) for d in docs]
    logging.debug("Retrieved %d documents from %s", len(records), collection)
    return records


def update_record(db: FirestoreClient, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
    """Merges `data` into an existing document. A client-supplied `id` is dropped."""
    fields = {k: v for k, v in data.items() if k != "id"}
    try:
        ref = db.collection(collection).document(str(doc_id))
        if fields:
            ref.update(fields)
        elif not ref.get().exists:
            # Same outcome as Firestore's update() on a missing document
            raise LookupError(f"No document to update: {collection}/{doc_id}")
        else:
            logging.info("Nothing to update on %s/%s after dropping id", collection, doc_id)
            return
    except Exception as e:
        logging.exception("Failed to update %s/%s", collection, doc_id)
        raise StorageFailure(f"Failed to update {collection}") from e
    logging.info("Updated %s document %s", collection, doc_id)


def delete_record(db: FirestoreClient, collection: str, doc_id: str) -> None:
    # Firestore deletes of missing documents succeed
    try:
        db.collection(collection).document(str(doc_id)).delete()
    except Exception as e:
        logging.exception("Failed to delete %s/%s", collection, doc_id)
        raise StorageFailure(f"Failed to delete from {collection}") from e
    logging.info("Deleted %s document %s", collection, doc_id)
