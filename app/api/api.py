from fastapi import APIRouter

from app.api.endpoints import (
    auth,
    courses,
    disputes,
    lecturers,
    results,
    students,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(students.router, prefix="/students", tags=["Students"])
api_router.include_router(courses.router, prefix="/courses", tags=["Courses"])
api_router.include_router(lecturers.router, prefix="/lecturers", tags=["Lecturers"])
api_router.include_router(results.router, prefix="/results", tags=["Results"])
api_router.include_router(disputes.router, prefix="/disputes", tags=["Disputes"])
