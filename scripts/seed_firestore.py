"""
Seeds Firestore with a small demo data set (students, courses, lecturers,
results and one dispute). Collections that already hold documents are left
untouched.
Usage: python -m scripts.seed_firestore
"""
import logging

from app.core.firebase_connector import initialize_firebase, get_firestore_client
from app.crud.crud_firestore import create_record
from app.models.firestore_models import (
    COURSES_COLLECTION,
    DISPUTES_COLLECTION,
    LECTURERS_COLLECTION,
    RESULTS_COLLECTION,
    STUDENTS_COLLECTION,
    Course,
    Dispute,
    Lecturer,
    Result,
    Student,
    DISPUTE_PENDING,
)

SEED_DATA = {
    STUDENTS_COLLECTION: [
        Student(roll_number="CS2024001", name="Amina Yusuf", email="amina.yusuf@example.edu"),
        Student(roll_number="CS2024002", name="Kwame Mensah", email="kwame.mensah@example.edu"),
    ],
    COURSES_COLLECTION: [
        Course(course_code="CS101", course_name="Introduction to Programming", course_instructor="Dr. Okafor"),
        Course(course_code="MA201", course_name="Linear Algebra", course_instructor="Prof. Lindqvist"),
    ],
    LECTURERS_COLLECTION: [
        Lecturer(lecturer_id="L-001", lecturer_name="Dr. Okafor", lecturer_email="okafor@example.edu"),
        Lecturer(lecturer_id="L-002", lecturer_name="Prof. Lindqvist", lecturer_email="lindqvist@example.edu"),
    ],
    RESULTS_COLLECTION: [
        Result(roll_number="CS2024001", course_code="CS101", marks=78, grade="B+"),
        Result(roll_number="CS2024002", course_code="MA201", marks=91, grade="A"),
    ],
    DISPUTES_COLLECTION: [
        Dispute(roll_number="CS2024001", course_code="CS101", reason="Question 4 was not graded", status=DISPUTE_PENDING),
    ],
}


def seed(db):
    for collection, records in SEED_DATA.items():
        existing = list(db.collection(collection).limit(1).stream())
        if existing:
            logging.info("Collection %s already has documents, skipping", collection)
            continue
        for record in records:
            created = create_record(db, collection, record.model_copy())
            logging.info("Created %s document (id=%s)", collection, created.id)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    initialize_firebase()
    seed(get_firestore_client())
