"""
Curriculum API Router.

Endpoints for:
- Listing semesters and selecting the active one
- Listing and selecting subjects of the active semester
- Toggling unit completion and reading progress
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from bca_assistant.api.dependencies import get_study_service
from bca_assistant.curriculum import list_semesters
from bca_assistant.session import AppMode, SessionState, semester_progress, subject_progress
from bca_assistant.study import StudyService

router = APIRouter()


# ========================================
# Request/Response Models
# ========================================


class ModeRequest(BaseModel):
    """Request model for switching views."""

    mode: AppMode = Field(..., description="SEMESTER_SELECT, CHAT, FLASHCARDS, QUIZ or COMPILER")


class SessionResponse(BaseModel):
    """Summary of the current session."""

    mode: str
    semester_id: int | None
    subject_id: str | None
    online: bool
    learner_mode: bool
    semester_progress: int


class ProgressResponse(BaseModel):
    semester_id: int | None
    overall: int
    subjects: dict[str, int]


def session_summary(state: SessionState) -> SessionResponse:
    return SessionResponse(
        mode=state.mode.value,
        semester_id=state.semester_id,
        subject_id=state.subject_id.value if state.subject_id else None,
        online=state.online,
        learner_mode=state.learner_mode,
        semester_progress=semester_progress(state),
    )


def subject_payload(state: SessionState) -> list[dict[str, Any]]:
    return [
        {**subject.to_dict(), "progress": subject_progress(subject)}
        for subject in state.subjects
    ]


# ========================================
# Endpoints
# ========================================


@router.get("/semesters")
def get_semesters() -> list[dict[str, Any]]:
    """List all semesters; only active ones can be selected."""
    return [semester.to_dict() for semester in list_semesters()]


@router.post("/semesters/{semester_id}/select", response_model=SessionResponse)
def choose_semester(semester_id: int, service: StudyService = Depends(get_study_service)):
    return session_summary(service.select_semester(semester_id))


@router.get("/subjects")
def get_subjects(service: StudyService = Depends(get_study_service)) -> list[dict[str, Any]]:
    """Subjects of the active semester, with this session's unit progress."""
    return subject_payload(service.state)


@router.post("/subjects/{subject_id}/select", response_model=SessionResponse)
def choose_subject(subject_id: str, service: StudyService = Depends(get_study_service)):
    return session_summary(service.select_subject(subject_id))


@router.post("/subjects/{subject_id}/units/{unit_id}/toggle")
def flip_unit(
    subject_id: str,
    unit_id: str,
    service: StudyService = Depends(get_study_service),
) -> list[dict[str, Any]]:
    """Toggle a unit's completion. Unknown ids leave progress unchanged."""
    return subject_payload(service.toggle_unit(subject_id, unit_id))


@router.get("/progress", response_model=ProgressResponse)
def get_progress(service: StudyService = Depends(get_study_service)):
    state = service.state
    return ProgressResponse(
        semester_id=state.semester_id,
        overall=semester_progress(state),
        subjects={subject.id.value: subject_progress(subject) for subject in state.subjects},
    )


@router.get("/session", response_model=SessionResponse)
def get_session(service: StudyService = Depends(get_study_service)):
    return session_summary(service.state)


@router.post("/mode", response_model=SessionResponse)
def change_mode(request: ModeRequest, service: StudyService = Depends(get_study_service)):
    return session_summary(service.set_mode(request.mode))
