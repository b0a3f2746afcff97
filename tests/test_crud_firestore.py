import pytest

from app.core.exceptions import StorageFailure
from app.crud import crud_firestore
from app.models.firestore_models import Result, Student, STUDENTS_COLLECTION
from scripts.seed_firestore import SEED_DATA, seed


def test_create_record_replaces_caller_id(fake_db):
    student = Student(id="mine", roll_number="CS9", name="Grace", email="grace@example.edu")
    created = crud_firestore.create_record(fake_db, STUDENTS_COLLECTION, student)

    assert created.id and created.id != "mine"
    assert fake_db.collections[STUDENTS_COLLECTION] == {
        created.id: {"id": created.id, "rollNumber": "CS9", "name": "Grace", "email": "grace@example.edu"}
    }


def test_null_fields_are_not_stored(fake_db):
    created = crud_firestore.create_record(fake_db, "Results", Result(roll_number="CS9", marks=0))
    assert fake_db.collections["Results"][created.id] == {"id": created.id, "rollNumber": "CS9", "marks": 0}


def test_get_record_returns_none_when_absent(fake_db):
    assert crud_firestore.get_record(fake_db, STUDENTS_COLLECTION, Student, "missing") is None


def test_list_records_uses_document_id(fake_db):
    # Documents written by other tools may lack or disagree on the embedded id
    fake_db.collection(STUDENTS_COLLECTION).document("doc-1").set({"rollNumber": "A1", "name": "A", "email": "a@x"})
    fake_db.collection(STUDENTS_COLLECTION).document("doc-2").set({"id": "stale", "rollNumber": "B1"})

    records = crud_firestore.list_records(fake_db, STUDENTS_COLLECTION, Student)
    assert [r.id for r in records] == ["doc-1", "doc-2"]


def test_update_record_drops_id_and_does_not_mutate_input(fake_db):
    created = crud_firestore.create_record(fake_db, STUDENTS_COLLECTION, Student(roll_number="R", name="N", email="e"))
    data = {"id": "hijack", "name": "New"}
    crud_firestore.update_record(fake_db, STUDENTS_COLLECTION, created.id, data)

    stored = fake_db.collections[STUDENTS_COLLECTION][created.id]
    assert stored["id"] == created.id
    assert stored["name"] == "New"
    assert data == {"id": "hijack", "name": "New"}


def test_update_missing_document_raises_storage_failure(fake_db):
    with pytest.raises(StorageFailure):
        crud_firestore.update_record(fake_db, STUDENTS_COLLECTION, "ghost", {"name": "x"})


def test_delete_record_is_idempotent(fake_db):
    crud_firestore.delete_record(fake_db, STUDENTS_COLLECTION, "never-existed")


def test_seed_only_fills_empty_collections(fake_db):
    fake_db.collection(STUDENTS_COLLECTION).document("keep").set({"rollNumber": "OLD"})
    seed(fake_db)

    assert list(fake_db.collections[STUDENTS_COLLECTION]) == ["keep"]
    for collection, records in SEED_DATA.items():
        if collection != STUDENTS_COLLECTION:
            assert len(fake_db.collections[collection]) == len(records)

    seed(fake_db)
    assert len(fake_db.collections["Courses"]) == len(SEED_DATA["Courses"])


def test_update_with_only_id_on_missing_document_fails(fake_db):
    with pytest.raises(StorageFailure):
        crud_firestore.update_record(fake_db, STUDENTS_COLLECTION, "ghost", {"id": "x"})
    assert "ghost" not in fake_db.collections[STUDENTS_COLLECTION]
