"""FastAPI application entry point. Registers middleware, error handlers and API routers."""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from peernotes import database
from peernotes.config import settings
from peernotes.database import Base
from peernotes.exceptions import InvalidInput, PeerNotesError, StorageError
import peernotes.models  # noqa: F401 - registers model metadata
from peernotes.routers import moderation, notes

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PeerNotes API",
    description="Anonymous note sharing with AI content moderation",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(notes.router)
app.include_router(moderation.router)


def _error_response(exc: PeerNotesError) -> JSONResponse:
    body = {"error": exc.detail}
    if exc.reason:
        body["reason"] = exc.reason
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(PeerNotesError)
async def peernotes_error_handler(request: Request, exc: PeerNotesError):
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return _error_response(InvalidInput("Invalid request body"))


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("[store] %s %s failed", request.method, request.url.path, exc_info=exc)
    return _error_response(StorageError())


@app.on_event("startup")
def ensure_schema():
    if database.engine is None:
        logger.warning("[store] DATABASE_URL is empty, running without a note store")
        return
    Base.metadata.create_all(bind=database.engine)


@app.get("/api/health")
def health_check():
    return {
        "status": "ok",
        "service": "PeerNotes",
        "database": "configured" if database.SessionLocal is not None else "not_configured",
    }
