"""
Study Service: orchestration layer for one learner's session.

Each public method handles one user intent:
1. Validate input (nothing is sent to the model for empty input)
2. Apply reducers to the session state
3. Compose the request and call the gateway
4. Merge the result back, unless a newer request for the same slot
   has superseded it

The pending flag for a slot is always cleared, success or failure.
"""

from __future__ import annotations

import threading
from typing import Callable

from loguru import logger

from bca_assistant.curriculum import Subject, SubjectId, get_semester
from bca_assistant.errors import (
    InvalidInputError,
    MissingCredentialError,
    NoActiveSubjectError,
    SemesterUnavailableError,
    UnknownSubjectError,
)
from bca_assistant.gateway import ChatReply, Difficulty, GeminiGateway
from bca_assistant.gateway.gemini_gateway import CHAT_ERROR_TEXT
from bca_assistant.session import (
    AppMode,
    Message,
    RequestTokens,
    Role,
    SessionState,
    Slot,
    active_subject,
    append_message,
    append_notes,
    initial_state,
    make_message,
    messages_for,
    notes_for,
    select_semester,
    select_subject,
    set_mode,
    set_online,
    toggle_learner_mode,
    toggle_online,
    toggle_unit,
)
from bca_assistant.session.state import now_ms
from bca_assistant.tutor import compose_chat

from .deck import FlashcardDeck
from .quiz import QuizRunner

NOT_CONFIGURED_TEXT = "Error: AI service is not configured. Set GEMINI_API_KEY and try again."
DEFAULT_FLASHCARD_TOPIC = "General Concepts"


class StudyService:
    """Owns the session state and routes every intent through the gateway."""

    def __init__(
        self,
        gateway: GeminiGateway,
        state: SessionState | None = None,
        tokens: RequestTokens | None = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.gateway = gateway
        self.tokens = tokens or RequestTokens()
        self._state = state or initial_state()
        self._clock = clock
        self._lock = threading.Lock()

        self.deck: FlashcardDeck | None = None
        self.quiz: QuizRunner | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    def _apply(self, reducer: Callable[..., SessionState], *args) -> SessionState:
        with self._lock:
            self._state = reducer(self._state, *args)
            return self._state

    def _require_subject(self) -> Subject:
        subject = active_subject(self._state)
        if subject is None:
            raise NoActiveSubjectError()
        return subject

    @staticmethod
    def _require_text(value: str, what: str) -> str:
        if not value or not value.strip():
            raise InvalidInputError(f"{what} must not be empty")
        return value

    # =========================================================================
    # Navigation and flags
    # =========================================================================

    def select_semester(self, semester_id: int) -> SessionState:
        semester = get_semester(semester_id)
        if semester is None:
            raise SemesterUnavailableError(f"Semester {semester_id} does not exist")
        if not semester.is_active:
            raise SemesterUnavailableError(
                f"{semester.name} content is being updated. Check back soon!"
            )
        logger.info(f"Selected {semester.name}")
        return self._apply(select_semester, semester)

    def select_subject(self, subject_id: SubjectId | str) -> SessionState:
        if not any(s.id == subject_id for s in self._state.subjects):
            raise UnknownSubjectError(f"Subject {subject_id} is not in the active semester")
        return self._apply(select_subject, subject_id)

    def set_mode(self, mode: AppMode) -> SessionState:
        return self._apply(set_mode, mode)

    def toggle_unit(self, subject_id: SubjectId | str, unit_id: str) -> SessionState:
        return self._apply(toggle_unit, subject_id, unit_id)

    def set_online(self, online: bool) -> SessionState:
        return self._apply(set_online, online)

    def toggle_online(self) -> SessionState:
        return self._apply(toggle_online)

    def toggle_learner_mode(self) -> SessionState:
        return self._apply(toggle_learner_mode)

    # =========================================================================
    # Chat
    # =========================================================================

    def upload_notes(self, text: str) -> str:
        """Append uploaded notes to the active subject; returns the accumulated notes."""
        subject = self._require_subject()
        self._require_text(text, "Notes")
        state = self._apply(append_notes, subject.id, text)
        logger.info(f"Notes for {subject.id.value} now {len(notes_for(state, subject.id))} chars")
        return notes_for(state, subject.id)

    def send_message(self, text: str) -> Message | None:
        """
        Send a chat message for the active subject.

        Appends the user message, asks the model, then appends the model
        message. Returns the model message, or None if a newer chat request
        superseded this one before the reply arrived.
        """
        self._require_text(text, "Message")
        subject = self._require_subject()
        token = self.tokens.issue(Slot.CHAT)

        try:
            with self._lock:
                state = self._state
                prior = messages_for(state, subject.id)
                user_message = make_message(prior, Role.USER, text, clock=self._clock)
                self._state = append_message(state, subject.id, user_message)
                notes = notes_for(state, subject.id)
                online = state.online

            prompt = compose_chat(
                message=text,
                persona=subject.system_instruction,
                knowledge_base=subject.knowledge_base,
                notes=notes,
                transcript=prior,
                online=online,
            )

            try:
                reply = self.gateway.chat(prompt)
            except MissingCredentialError as e:
                logger.error(f"Chat unavailable: {e}")
                reply = ChatReply(text=CHAT_ERROR_TEXT)

            if not self.tokens.is_current(token):
                logger.info("Discarding stale chat reply")
                return None

            with self._lock:
                transcript = messages_for(self._state, subject.id)
                model_message = make_message(
                    transcript,
                    Role.MODEL,
                    reply.text,
                    sources=reply.sources if online else (),
                    clock=self._clock,
                )
                self._state = append_message(self._state, subject.id, model_message)
            return model_message
        finally:
            self.tokens.release(token)

    # =========================================================================
    # Flashcards, quiz, document
    # =========================================================================

    def generate_flashcards(self, topic: str = DEFAULT_FLASHCARD_TOPIC) -> FlashcardDeck | None:
        """Generate a deck for the active subject. An empty deck means nothing was generated."""
        self._require_text(topic, "Topic")
        subject = self._require_subject()
        notes = "\n".join(
            part for part in (notes_for(self._state, subject.id), subject.knowledge_base) if part
        )
        token = self.tokens.issue(Slot.FLASHCARDS)
        try:
            cards = self.gateway.generate_flashcards(topic, subject.name, notes)
            if not self.tokens.is_current(token):
                logger.info("Discarding stale flashcard batch")
                return None
            self.deck = FlashcardDeck(topic=topic, cards=cards)
            return self.deck
        finally:
            self.tokens.release(token)

    def start_quiz(self, topic: str, difficulty: Difficulty | str = Difficulty.MEDIUM) -> QuizRunner | None:
        """Generate a quiz for the active subject. An empty runner means nothing was generated."""
        self._require_text(topic, "Topic")
        try:
            difficulty = Difficulty(difficulty)
        except ValueError:
            raise InvalidInputError(f"Unknown difficulty: {difficulty}") from None
        subject = self._require_subject()
        token = self.tokens.issue(Slot.QUIZ)
        try:
            questions = self.gateway.generate_quiz(topic, subject.name, difficulty)
            if not self.tokens.is_current(token):
                logger.info("Discarding stale quiz batch")
                return None
            self.quiz = QuizRunner(topic=topic, difficulty=difficulty, questions=questions)
            return self.quiz
        finally:
            self.tokens.release(token)

    def generate_unit_document(self) -> str | None:
        """Study notes covering every unit of the active subject."""
        subject = self._require_subject()
        token = self.tokens.issue(Slot.DOCUMENT)
        try:
            document = self.gateway.generate_document(
                subject.name, [unit.title for unit in subject.units]
            )
            if not self.tokens.is_current(token):
                return None
            return document
        finally:
            self.tokens.release(token)

    # =========================================================================
    # C lab
    # =========================================================================

    def run_code(self, source: str, stdin: str = "") -> str | None:
        self._require_text(source, "Source code")
        if not self.gateway.is_available:
            return NOT_CONFIGURED_TEXT
        token = self.tokens.issue(Slot.COMPILER)
        try:
            output = self.gateway.simulate_compile(source, stdin)
            return output if self.tokens.is_current(token) else None
        finally:
            self.tokens.release(token)

    def scan_code(self, image: bytes, mime_type: str) -> str | None:
        if not image:
            raise InvalidInputError("Image must not be empty")
        if not mime_type or not mime_type.startswith("image/"):
            raise InvalidInputError(f"Unsupported file type: {mime_type or 'unknown'}")
        if not self.gateway.is_available:
            return NOT_CONFIGURED_TEXT
        token = self.tokens.issue(Slot.SCANNER)
        try:
            code = self.gateway.extract_code_from_image(image, mime_type)
            return code if self.tokens.is_current(token) else None
        finally:
            self.tokens.release(token)
