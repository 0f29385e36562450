"""API routers for the BCA study assistant."""

from bca_assistant.api.routers import (
    chat_router,
    curriculum_router,
    lab_router,
    study_router,
)

__all__ = [
    "curriculum_router",
    "chat_router",
    "study_router",
    "lab_router",
]
