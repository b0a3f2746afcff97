"""
Main FastAPI application
"""
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
import logging
import time
from urllib.parse import urlparse

from app.core.config import settings
from app.core.exceptions import SRMException
from app.core.firebase_connector import initialize_firebase
from app.api.api import api_router


def configure_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    configure_logging()
    logging.info("Starting %s v%s (debug=%s)", settings.APP_NAME, settings.APP_VERSION, settings.DEBUG)

    # One Firestore/Auth app for the whole process
    initialize_firebase()

    yield

    logging.info("Shutting down %s", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Student result management: students, courses, lecturers, results and disputes",
    lifespan=lifespan,
    docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
    redoc_url=f"{settings.API_PREFIX}/redoc" if settings.DEBUG else None,
)


# --- CORS ---
def _sanitize_origins(origins_list):
    clean = []
    for o in origins_list:
        if not o or o == "*":
            continue
        parsed = urlparse(o)
        if parsed.scheme in ("http", "https") and parsed.netloc:
            clean.append(o.rstrip("/"))
    return list(dict.fromkeys(clean))


if settings.DEBUG:
    origins_to_allow = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8080",
        "http://127.0.0.1:8000",
        "http://localhost:8000",
    ]
else:
    raw = settings.BACKEND_CORS_ORIGINS
    origins_to_allow = _sanitize_origins(raw if isinstance(raw, list) else [raw])

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins_to_allow,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


# --- Error rendering: every failure is {"error": message} ---
@app.exception_handler(SRMException)
async def srm_exception_handler(request: Request, exc: SRMException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"error": "Invalid request payload.", "detail": exc.errors()}),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An unexpected error occurred."},
    )


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/health", tags=["Monitoring"])
async def health_check():
    """Checks that the service is up."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": f"{settings.API_PREFIX}/docs" if settings.DEBUG else "disabled",
        "api": settings.API_PREFIX,
    }

# Development server:
# uvicorn app.main:app --reload
