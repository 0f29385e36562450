"""
Unit tests for the study service.

Covers the chat flow end to end against a fake model, stale-reply
discard, input validation and the study material intents.
"""

import pytest

from bca_assistant.curriculum import SubjectId, find_subject
from bca_assistant.errors import (
    InvalidInputError,
    NoActiveSubjectError,
    SemesterUnavailableError,
    UnknownSubjectError,
)
from bca_assistant.gateway import Difficulty
from bca_assistant.gateway.gemini_gateway import CHAT_ERROR_TEXT
from bca_assistant.session import AppMode, Role, Slot, initial_state, messages_for, notes_for
from bca_assistant.study import StudyService
from bca_assistant.study.service import NOT_CONFIGURED_TEXT
from bca_assistant.tutor.prompts import OFFLINE_POLICY, ONLINE_POLICY


@pytest.fixture
def keyless_service(keyless_gateway, clock):
    svc = StudyService(gateway=keyless_gateway, state=initial_state(), clock=clock)
    svc.select_semester(1)
    svc.select_subject(SubjectId.PPA)
    return svc


# ========================================
# Navigation
# ========================================


class TestNavigation:
    def test_coming_soon_semester_rejected(self, gateway):
        service = StudyService(gateway=gateway)
        with pytest.raises(SemesterUnavailableError, match="Check back soon"):
            service.select_semester(3)
        assert service.state.semester_id is None

    def test_unknown_semester_rejected(self, gateway):
        with pytest.raises(SemesterUnavailableError):
            StudyService(gateway=gateway).select_semester(42)

    def test_unknown_subject_rejected(self, service):
        with pytest.raises(UnknownSubjectError):
            service.select_subject("PHYSICS")

    def test_subject_before_semester_rejected(self, gateway):
        with pytest.raises(UnknownSubjectError):
            StudyService(gateway=gateway).select_subject(SubjectId.PPA)

    def test_toggle_unit_and_back_navigation(self, ppa_service):
        state = ppa_service.toggle_unit(SubjectId.PPA, "u2")
        assert state.subjects[0].units[1].is_completed
        state = ppa_service.set_mode(AppMode.SEMESTER_SELECT)
        assert state.subject_id is None

    def test_online_flags(self, ppa_service):
        assert ppa_service.toggle_online().online is True
        assert ppa_service.set_online(False).online is False
        assert ppa_service.toggle_learner_mode().learner_mode is True


# ========================================
# Chat
# ========================================


class TestChat:
    """Tests for send_message."""

    def test_summarize_unit_one_offline(self, ppa_service, fake_client, response):
        """A first question on PPA is answered from the built-in notes, no search."""
        fake_client.queue(response("Unit 1 introduces C and algorithms.", uris=["https://x"]))

        reply = ppa_service.send_message("Summarize Unit 1")

        transcript = messages_for(ppa_service.state, SubjectId.PPA)
        assert [(m.role, m.text) for m in transcript] == [
            (Role.USER, "Summarize Unit 1"),
            (Role.MODEL, "Unit 1 introduces C and algorithms."),
        ]
        assert reply == transcript[-1]
        assert reply.sources == ()
        assert transcript[0].timestamp < transcript[1].timestamp

        call = fake_client.calls[0]
        instruction = call["config"].system_instruction
        assert instruction.startswith(find_subject(SubjectId.PPA).system_instruction)
        assert find_subject(SubjectId.PPA).knowledge_base in instruction
        assert instruction.endswith(OFFLINE_POLICY)
        assert call["config"].tools is None
        assert call["contents"] == [{"role": "user", "parts": [{"text": "Summarize Unit 1"}]}]

    def test_online_reply_keeps_sources(self, ppa_service, fake_client, response):
        ppa_service.set_online(True)
        fake_client.queue(response("answer", uris=["https://a", "https://a"]))

        reply = ppa_service.send_message("Latest C standard?")

        assert reply.sources == ("https://a",)
        assert fake_client.last_config.system_instruction.endswith(ONLINE_POLICY)

    def test_prior_transcript_sent_once(self, ppa_service, fake_client, response):
        fake_client.queue(response("first answer"), response("second answer"))
        ppa_service.send_message("first")
        ppa_service.send_message("second")

        texts = [turn["parts"][0]["text"] for turn in fake_client.calls[1]["contents"]]
        assert texts == ["first", "first answer", "second"]

    def test_notes_injected(self, ppa_service, fake_client, response):
        ppa_service.upload_notes("my pointer notes")
        fake_client.queue(response("ok"))
        ppa_service.send_message("explain")
        assert "[USER NOTES]:\nmy pointer notes" in fake_client.last_config.system_instruction

    def test_empty_message_rejected(self, ppa_service, fake_client):
        with pytest.raises(InvalidInputError):
            ppa_service.send_message("   ")
        assert fake_client.calls == []
        assert messages_for(ppa_service.state, SubjectId.PPA) == ()

    def test_no_subject_rejected(self, service):
        with pytest.raises(NoActiveSubjectError):
            service.send_message("hello")

    def test_missing_key_reply_is_error_message(self, keyless_service):
        reply = keyless_service.send_message("hello")
        assert reply.text == CHAT_ERROR_TEXT
        assert reply.role == Role.MODEL
        assert len(messages_for(keyless_service.state, SubjectId.PPA)) == 2

    def test_stale_reply_discarded(self, ppa_service, fake_client, response):
        """A reply that arrives after a newer chat request is dropped."""
        fake_client.on_call = lambda: ppa_service.tokens.issue(Slot.CHAT)
        fake_client.queue(response("late answer"))

        assert ppa_service.send_message("question") is None

        transcript = messages_for(ppa_service.state, SubjectId.PPA)
        assert [m.text for m in transcript] == ["question"]
        assert ppa_service.tokens.pending(Slot.CHAT)

    def test_pending_cleared_after_failure(self, ppa_service, fake_client):
        fake_client.queue(OSError("down"))
        ppa_service.send_message("hello")
        assert not ppa_service.tokens.pending(Slot.CHAT)


class TestNotes:
    def test_upload_accumulates(self, ppa_service):
        ppa_service.upload_notes("one")
        assert ppa_service.upload_notes("two") == "one\ntwo"

    def test_empty_upload_rejected(self, ppa_service):
        with pytest.raises(InvalidInputError):
            ppa_service.upload_notes("")
        assert notes_for(ppa_service.state, SubjectId.PPA) == ""

    def test_upload_requires_subject(self, service):
        with pytest.raises(NoActiveSubjectError):
            service.upload_notes("text")


# ========================================
# Study material
# ========================================


class TestFlashcards:
    def test_deck_created(self, ppa_service, fake_client, response, flashcard_payload):
        fake_client.queue(response(flashcard_payload))
        deck = ppa_service.generate_flashcards("I/O")

        assert deck is ppa_service.deck
        assert len(deck.cards) == 2
        assert deck.topic == "I/O"

    def test_notes_and_knowledge_sent(self, ppa_service, fake_client, response):
        ppa_service.upload_notes("UPLOADED")
        fake_client.queue(response("[]"))
        ppa_service.generate_flashcards()

        prompt = fake_client.calls[0]["contents"]
        assert "General Concepts" in prompt
        assert "UPLOADED\n" in prompt

    def test_empty_topic_rejected(self, ppa_service):
        with pytest.raises(InvalidInputError):
            ppa_service.generate_flashcards("")

    def test_missing_key_empty_deck(self, keyless_service):
        deck = keyless_service.generate_flashcards("Loops")
        assert deck.is_empty


class TestQuiz:
    def test_quiz_started(self, ppa_service, fake_client, response, quiz_payload):
        fake_client.queue(response(quiz_payload))
        quiz = ppa_service.start_quiz("Loops", "Hard")

        assert quiz is ppa_service.quiz
        assert quiz.difficulty == Difficulty.HARD
        assert len(quiz.questions) == 2

    def test_unknown_difficulty(self, ppa_service, fake_client):
        with pytest.raises(InvalidInputError, match="Unknown difficulty"):
            ppa_service.start_quiz("Loops", "Impossible")
        assert fake_client.calls == []

    def test_missing_key_empty_quiz(self, keyless_service):
        assert keyless_service.start_quiz("Loops").is_empty

    def test_stale_quiz_discarded(self, ppa_service, fake_client, response, quiz_payload):
        fake_client.on_call = lambda: ppa_service.tokens.issue(Slot.QUIZ)
        fake_client.queue(response(quiz_payload))
        assert ppa_service.start_quiz("Loops") is None
        assert ppa_service.quiz is None


class TestDocument:
    def test_document_uses_all_units(self, ppa_service, fake_client, response):
        fake_client.queue(response("## Unit I: Introduction to C & Algorithms\n..."))
        document = ppa_service.generate_unit_document()

        assert document.startswith("## Unit I")
        prompt = fake_client.calls[0]["contents"]
        for unit in find_subject(SubjectId.PPA).units:
            assert f"- {unit.title}" in prompt

    def test_requires_subject(self, service):
        with pytest.raises(NoActiveSubjectError):
            service.generate_unit_document()


# ========================================
# C lab
# ========================================


class TestCLab:
    def test_run_code(self, service, fake_client, response):
        fake_client.queue(response("12\n"))
        assert service.run_code("int main(){}", "5 7") == "12\n"
        assert "stdin:\n5 7" in fake_client.calls[0]["contents"]

    def test_run_empty_source_rejected(self, service):
        with pytest.raises(InvalidInputError):
            service.run_code("  ")

    def test_run_without_key(self, keyless_service):
        assert keyless_service.run_code("int main(){}") == NOT_CONFIGURED_TEXT

    def test_scan_rejects_non_image(self, service, fake_client):
        with pytest.raises(InvalidInputError, match="Unsupported file type"):
            service.scan_code(b"%PDF", "application/pdf")
        assert fake_client.calls == []

    def test_scan_rejects_empty_image(self, service):
        with pytest.raises(InvalidInputError):
            service.scan_code(b"", "image/png")

    def test_scan_image(self, service, fake_client, response):
        fake_client.queue(response("int main(void) { return 0; }"))
        assert service.scan_code(b"img", "image/png") == "int main(void) { return 0; }"
