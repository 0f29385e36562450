"""
Study API Router.

Endpoints for:
- Flashcard generation and deck navigation
- Quiz generation, answering and advancing
- Unit study documents
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from bca_assistant.api.dependencies import get_study_service
from bca_assistant.gateway import Difficulty
from bca_assistant.gateway.models import QUIZ_OPTION_COUNT
from bca_assistant.study import FlashcardDeck, QuizRunner, StudyService
from bca_assistant.study.service import DEFAULT_FLASHCARD_TOPIC

router = APIRouter()

SUPERSEDED = "Superseded by a newer request"


# ========================================
# Request/Response Models
# ========================================


class FlashcardRequest(BaseModel):
    topic: str = Field(DEFAULT_FLASHCARD_TOPIC, description="Topic to focus the deck on")


class SeekRequest(BaseModel):
    index: int = Field(..., description="Card position; clamped to the deck")


class QuizRequest(BaseModel):
    topic: str = Field(..., description="Quiz topic")
    difficulty: str = Field(Difficulty.MEDIUM.value, description="Easy, Medium or Hard")


class AnswerRequest(BaseModel):
    option_index: int = Field(..., ge=0, le=QUIZ_OPTION_COUNT - 1, description="Chosen option, 0-based")


class DocumentResponse(BaseModel):
    subject_id: str | None
    document: str


def _deck_payload(deck: FlashcardDeck) -> dict[str, Any]:
    return {**deck.to_dict(), "flipped": deck.flipped}


def _require_deck(service: StudyService) -> FlashcardDeck:
    if service.deck is None:
        raise HTTPException(status_code=404, detail="No flashcard deck generated yet")
    return service.deck


def _require_quiz(service: StudyService) -> QuizRunner:
    if service.quiz is None:
        raise HTTPException(status_code=404, detail="No quiz started yet")
    return service.quiz


# ========================================
# Flashcards
# ========================================


@router.post("/flashcards")
def create_flashcards(request: FlashcardRequest, service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    """Generate a deck. An empty card list means nothing usable came back."""
    deck = service.generate_flashcards(request.topic)
    if deck is None:
        raise HTTPException(status_code=409, detail=SUPERSEDED)
    return _deck_payload(deck)


@router.get("/flashcards")
def get_flashcards(service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    return _deck_payload(_require_deck(service))


@router.post("/flashcards/seek")
def seek_flashcard(request: SeekRequest, service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    deck = _require_deck(service)
    deck.seek(request.index)
    return _deck_payload(deck)


@router.post("/flashcards/flip")
def flip_flashcard(service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    deck = _require_deck(service)
    deck.flip()
    return _deck_payload(deck)


# ========================================
# Quiz
# ========================================


@router.post("/quiz")
def create_quiz(request: QuizRequest, service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    quiz = service.start_quiz(request.topic, request.difficulty)
    if quiz is None:
        raise HTTPException(status_code=409, detail=SUPERSEDED)
    return quiz.to_dict()


@router.post("/quiz/answer")
def answer_question(request: AnswerRequest, service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    """Answer the current question. Each question takes one answer."""
    quiz = _require_quiz(service)
    result = quiz.answer(request.option_index)
    if result is None:
        raise HTTPException(status_code=409, detail="Question already answered or quiz finished")
    return {
        "is_correct": result.is_correct,
        "correct_answer_index": result.correct_answer_index,
        "explanation": result.explanation,
        "score": quiz.score,
    }


@router.post("/quiz/next")
def next_question(service: StudyService = Depends(get_study_service)) -> dict[str, Any]:
    quiz = _require_quiz(service)
    quiz.next_question()
    return {**quiz.to_dict(), "summary": quiz.summary() if quiz.finished else None}


# ========================================
# Documents
# ========================================


@router.post("/document", response_model=DocumentResponse)
def create_document(service: StudyService = Depends(get_study_service)):
    document = service.generate_unit_document()
    if document is None:
        raise HTTPException(status_code=409, detail=SUPERSEDED)
    subject_id = service.state.subject_id
    return DocumentResponse(subject_id=subject_id.value if subject_id else None, document=document)
