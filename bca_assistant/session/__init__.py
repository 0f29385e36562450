"""Session state reducers and per-slot request tokens."""

from .state import (
    AppMode,
    Message,
    Role,
    SessionState,
    active_subject,
    append_message,
    append_notes,
    initial_state,
    make_message,
    messages_for,
    notes_for,
    select_semester,
    select_subject,
    semester_progress,
    set_mode,
    set_online,
    subject_progress,
    toggle_learner_mode,
    toggle_online,
    toggle_unit,
)
from .tokens import RequestToken, RequestTokens, Slot

__all__ = [
    "AppMode",
    "Message",
    "RequestToken",
    "RequestTokens",
    "Role",
    "SessionState",
    "Slot",
    "active_subject",
    "append_message",
    "append_notes",
    "initial_state",
    "make_message",
    "messages_for",
    "notes_for",
    "select_semester",
    "select_subject",
    "semester_progress",
    "set_mode",
    "set_online",
    "subject_progress",
    "toggle_learner_mode",
    "toggle_online",
    "toggle_unit",
]
