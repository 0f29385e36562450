"""
FastAPI application for the BCA study assistant.

Provides the JSON API the browser front end calls for:
- Semester, subject and unit progress
- Subject chat with notes upload and online/offline mode
- Flashcard decks, quizzes and unit study documents
- The C programming lab (simulated runs, code scanning)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from config import get_settings
from bca_assistant import __version__
from bca_assistant.errors import (
    AssistantError,
    InvalidInputError,
    MissingCredentialError,
    NoActiveSubjectError,
    SemesterUnavailableError,
    UnknownSubjectError,
)
from bca_assistant.logging_setup import configure_logging

settings = get_settings()

ERROR_STATUS: dict[type[AssistantError], int] = {
    InvalidInputError: 422,
    UnknownSubjectError: 404,
    NoActiveSubjectError: 409,
    SemesterUnavailableError: 409,
    MissingCredentialError: 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    configure_logging(settings.log_level, settings.log_file)
    logger.info("Starting BCA study assistant...")
    if not settings.has_ai_configured():
        logger.warning("GEMINI_API_KEY not set - chat will report errors and generators return nothing")
    logger.info(f"Service started on {settings.api_host}:{settings.api_port}")

    yield

    logger.info("Shutting down BCA study assistant...")


app = FastAPI(
    title="BCA Study Assistant",
    description="Syllabus-aware tutoring, flashcards, quizzes and a C lab backed by Gemini.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AssistantError)
async def assistant_error_handler(request: Request, exc: AssistantError) -> JSONResponse:
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        400,
    )
    logger.debug(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


# ========================================
# Health & Status Endpoints
# ========================================


@app.get("/", tags=["Health"])
def root() -> dict[str, str]:
    """Root endpoint returning service info."""
    return {
        "service": "bca-study-assistant",
        "version": __version__,
        "status": "ok",
    }


@app.get("/health", tags=["Health"])
def health_check() -> dict[str, Any]:
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": {
            "ai": "configured" if settings.has_ai_configured() else "not_configured",
        },
    }


@app.get("/config", tags=["Health"])
def get_config() -> dict[str, Any]:
    """Get current configuration (non-sensitive)."""
    return {
        "ai": {
            "gemini_configured": settings.has_ai_configured(),
            **settings.get_generation_config(),
        },
        "default_online": settings.default_online,
    }


# ========================================
# Import and mount routers
# ========================================

from bca_assistant.api.routers import (  # noqa: E402
    chat_router,
    curriculum_router,
    lab_router,
    study_router,
)

app.include_router(curriculum_router.router, prefix="/api/curriculum", tags=["Curriculum"])
app.include_router(chat_router.router, prefix="/api/chat", tags=["Chat"])
app.include_router(study_router.router, prefix="/api/study", tags=["Study"])
app.include_router(lab_router.router, prefix="/api/lab", tags=["C Lab"])
