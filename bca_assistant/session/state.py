"""
Session state for a study run.

State is an immutable value. Every update is a reducer: a pure, total
function taking the current state and returning a new one. Unknown subject
or unit ids leave the state unchanged; nothing here raises.
"""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable

from bca_assistant.curriculum.models import Semester, Subject, SubjectId

NOTES_SEPARATOR = "\n"


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


class AppMode(str, Enum):
    """Which view the learner is on."""

    SEMESTER_SELECT = "SEMESTER_SELECT"
    CHAT = "CHAT"
    FLASHCARDS = "FLASHCARDS"
    QUIZ = "QUIZ"
    COMPILER = "COMPILER"


@dataclass(frozen=True)
class Message:
    """One transcript entry. Never edited once appended."""

    id: str
    role: Role
    text: str
    timestamp: int  # epoch milliseconds
    sources: tuple[str, ...] = ()
    is_thinking: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "role": self.role.value,
            "text": self.text,
            "timestamp": self.timestamp,
            "sources": list(self.sources),
            "is_thinking": self.is_thinking,
        }


def now_ms() -> int:
    return int(time.time() * 1000)


def make_message(
    transcript: tuple[Message, ...],
    role: Role,
    text: str,
    sources: tuple[str, ...] | list[str] = (),
    clock: Callable[[], int] = now_ms,
) -> Message:
    """
    Build the next message for a transcript.

    The timestamp is bumped past the last entry so append order and
    timestamp order always agree, even within the same millisecond.
    """
    timestamp = clock()
    if transcript and timestamp <= transcript[-1].timestamp:
        timestamp = transcript[-1].timestamp + 1
    return Message(
        id=uuid.uuid4().hex,
        role=role,
        text=text,
        timestamp=timestamp,
        sources=tuple(sources),
    )


@dataclass(frozen=True)
class SessionState:
    """
    Everything that changes while a learner studies.

    chat_history and context_notes are keyed by subject id and are replaced,
    never mutated, by the reducers below.
    """

    mode: AppMode = AppMode.SEMESTER_SELECT
    semester_id: int | None = None
    subject_id: SubjectId | None = None
    online: bool = False
    learner_mode: bool = False
    subjects: tuple[Subject, ...] = ()
    chat_history: dict[SubjectId, tuple[Message, ...]] = field(default_factory=dict)
    context_notes: dict[SubjectId, str] = field(default_factory=dict)


def initial_state(online: bool = False) -> SessionState:
    return SessionState(online=online)


def _subject_key(subject_id: SubjectId | str | None) -> SubjectId | None:
    if subject_id is None:
        return None
    try:
        return SubjectId(subject_id)
    except ValueError:
        return None


# =============================================================================
# Reducers
# =============================================================================


def append_message(state: SessionState, subject_id: SubjectId | str, message: Message) -> SessionState:
    key = _subject_key(subject_id)
    if key is None:
        return state
    transcript = state.chat_history.get(key, ())
    if any(existing.id == message.id for existing in transcript):
        return state
    history = dict(state.chat_history)
    history[key] = transcript + (message,)
    return replace(state, chat_history=history)


def append_notes(state: SessionState, subject_id: SubjectId | str, text: str) -> SessionState:
    """Append an upload to the subject's notes, newline-separated."""
    key = _subject_key(subject_id)
    if key is None or not text:
        return state
    existing = state.context_notes.get(key, "")
    notes = dict(state.context_notes)
    notes[key] = f"{existing}{NOTES_SEPARATOR}{text}" if existing else text
    return replace(state, context_notes=notes)


def toggle_unit(state: SessionState, subject_id: SubjectId | str, unit_id: str) -> SessionState:
    key = _subject_key(subject_id)
    changed = False
    subjects = []
    for subject in state.subjects:
        if subject.id == key and any(u.id == unit_id for u in subject.units):
            units = tuple(u.toggled() if u.id == unit_id else u for u in subject.units)
            subject = replace(subject, units=units)
            changed = True
        subjects.append(subject)
    if not changed:
        return state
    return replace(state, subjects=tuple(subjects))


def select_semester(state: SessionState, semester: Semester) -> SessionState:
    """
    Load a semester's subjects as fresh working copies.

    Re-entering the semester already loaded keeps its working copies, so
    unit completion survives a trip back to the semester picker.
    """
    if not semester.is_active:
        return state
    if semester.id == state.semester_id and state.subjects:
        return replace(state, subject_id=None, mode=AppMode.CHAT)
    return replace(
        state,
        semester_id=semester.id,
        subjects=semester.subjects,
        subject_id=None,
        mode=AppMode.CHAT,
    )


def select_subject(state: SessionState, subject_id: SubjectId | str) -> SessionState:
    key = _subject_key(subject_id)
    if key is None or not any(s.id == key for s in state.subjects):
        return state
    return replace(state, subject_id=key, mode=AppMode.CHAT)


def set_mode(state: SessionState, mode: AppMode) -> SessionState:
    if mode == AppMode.SEMESTER_SELECT:
        return replace(state, mode=mode, subject_id=None)
    return replace(state, mode=mode)


def set_online(state: SessionState, online: bool) -> SessionState:
    return replace(state, online=online)


def toggle_online(state: SessionState) -> SessionState:
    return replace(state, online=not state.online)


def toggle_learner_mode(state: SessionState) -> SessionState:
    return replace(state, learner_mode=not state.learner_mode)


# =============================================================================
# Read helpers
# =============================================================================


def active_subject(state: SessionState) -> Subject | None:
    for subject in state.subjects:
        if subject.id == state.subject_id:
            return subject
    return None


def messages_for(state: SessionState, subject_id: SubjectId | str) -> tuple[Message, ...]:
    key = _subject_key(subject_id)
    return state.chat_history.get(key, ()) if key else ()


def notes_for(state: SessionState, subject_id: SubjectId | str) -> str:
    key = _subject_key(subject_id)
    return state.context_notes.get(key, "") if key else ""


def subject_progress(subject: Subject) -> int:
    """Completed units as a rounded percentage."""
    if not subject.units:
        return 0
    done = sum(1 for u in subject.units if u.is_completed)
    return round(done / len(subject.units) * 100)


def semester_progress(state: SessionState) -> int:
    total = sum(len(s.units) for s in state.subjects)
    if total == 0:
        return 0
    done = sum(1 for s in state.subjects for u in s.units if u.is_completed)
    return round(done / total * 100)
