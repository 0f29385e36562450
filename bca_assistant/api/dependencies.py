"""Shared dependencies for API routers."""

from __future__ import annotations

from functools import lru_cache

from config import get_settings
from bca_assistant.gateway import GeminiGateway
from bca_assistant.session import initial_state
from bca_assistant.study import StudyService


@lru_cache(maxsize=1)
def get_study_service() -> StudyService:
    """The single study session served by this process."""
    settings = get_settings()
    return StudyService(
        gateway=GeminiGateway.from_settings(settings),
        state=initial_state(online=settings.default_online),
    )
