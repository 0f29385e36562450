"""
Chat API Router.

Endpoints for the subject tutor:
- Transcript read and message send
- Notes upload (JSON text or a text file)
- Online/offline and learner-mode switches
- Starter suggestions
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from loguru import logger
from pydantic import BaseModel, Field

from bca_assistant.api.dependencies import get_study_service
from bca_assistant.curriculum import CHAT_SUGGESTIONS
from bca_assistant.errors import InvalidInputError, NoActiveSubjectError
from bca_assistant.session import messages_for
from bca_assistant.study import StudyService

router = APIRouter()


# ========================================
# Request/Response Models
# ========================================


class MessageRequest(BaseModel):
    text: str = Field(..., description="Learner message")


class NotesRequest(BaseModel):
    text: str = Field(..., description="Notes text to append to the active subject")


class NotesResponse(BaseModel):
    subject_id: str
    characters: int


class OnlineRequest(BaseModel):
    online: bool | None = Field(None, description="Explicit value; omit to toggle")


class FlagsResponse(BaseModel):
    online: bool
    learner_mode: bool


def _active_subject_id(service: StudyService) -> str:
    if service.state.subject_id is None:
        raise NoActiveSubjectError()
    return service.state.subject_id.value


# ========================================
# Endpoints
# ========================================


@router.get("/messages")
def get_messages(service: StudyService = Depends(get_study_service)) -> list[dict[str, Any]]:
    """Transcript of the active subject, oldest first."""
    subject_id = _active_subject_id(service)
    return [message.to_dict() for message in messages_for(service.state, subject_id)]


@router.post("/messages")
def post_message(request: MessageRequest, service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    """Send a message and return the tutor's reply."""
    reply = service.send_message(request.text)
    if reply is None:
        raise HTTPException(status_code=409, detail="Superseded by a newer message")
    return reply.to_dict()


@router.post("/notes", response_model=NotesResponse)
def post_notes(request: NotesRequest, service: StudyService = Depends(get_study_service)):
    notes = service.upload_notes(request.text)
    return NotesResponse(subject_id=_active_subject_id(service), characters=len(notes))


@router.post("/notes/upload", response_model=NotesResponse)
async def upload_notes_file(
    file: UploadFile = File(...),
    service: StudyService = Depends(get_study_service),
):
    """Append a plain-text file to the active subject's notes."""
    raw = await file.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInputError(f"{file.filename} is not UTF-8 text") from None
    logger.info(f"Uploaded notes file {file.filename} ({len(raw)} bytes)")
    notes = await run_in_threadpool(service.upload_notes, text)
    return NotesResponse(subject_id=_active_subject_id(service), characters=len(notes))


@router.post("/online", response_model=FlagsResponse)
def change_online(request: OnlineRequest, service: StudyService = Depends(get_study_service)):
    state = service.toggle_online() if request.online is None else service.set_online(request.online)
    return FlagsResponse(online=state.online, learner_mode=state.learner_mode)


@router.post("/learner-mode", response_model=FlagsResponse)
def change_learner_mode(service: StudyService = Depends(get_study_service)):
    state = service.toggle_learner_mode()
    return FlagsResponse(online=state.online, learner_mode=state.learner_mode)


@router.get("/suggestions")
def get_suggestions() -> list[str]:
    return list(CHAT_SUGGESTIONS)
