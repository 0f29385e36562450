"""Exception hierarchy shared by the service, API and CLI layers."""

from __future__ import annotations


class AssistantError(Exception):
    """Base class for errors the assistant reports to a caller."""


class MissingCredentialError(AssistantError):
    """No Gemini API key is configured."""

    def __init__(self, message: str = "API key missing"):
        super().__init__(message)


class InvalidInputError(AssistantError):
    """User input was rejected before any model call was issued."""


class NoActiveSubjectError(AssistantError):
    """An operation needs an active subject and none is selected."""

    def __init__(self, message: str = "No subject selected"):
        super().__init__(message)


class SemesterUnavailableError(AssistantError):
    """The requested semester exists but its content is not published yet."""


class UnknownSubjectError(AssistantError):
    """The requested subject is not part of the active semester."""
