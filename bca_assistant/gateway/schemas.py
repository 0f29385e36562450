"""
Response schemas for structured Gemini output.

Passed as response_schema with response_mime_type application/json so the
model is constrained to a JSON array of fixed objects. Replies are still
re-validated locally (see gateway.models) before use.
"""

from __future__ import annotations

from .models import QUIZ_OPTION_COUNT

FLASHCARD_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "front": {
                "type": "STRING",
                "description": "The question or term on the front of the card",
            },
            "back": {
                "type": "STRING",
                "description": "The answer or definition on the back",
            },
            "topic": {
                "type": "STRING",
                "description": "The sub-topic this card belongs to",
            },
        },
        "required": ["front", "back", "topic"],
    },
}

QUIZ_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "question": {"type": "STRING"},
            "options": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
                "min_items": QUIZ_OPTION_COUNT,
                "max_items": QUIZ_OPTION_COUNT,
                "description": f"An array of {QUIZ_OPTION_COUNT} possible answers",
            },
            "correctAnswerIndex": {
                "type": "INTEGER",
                "description": "0-based index of the correct option",
            },
            "explanation": {
                "type": "STRING",
                "description": "Why the answer is correct",
            },
        },
        "required": ["question", "options", "correctAnswerIndex", "explanation"],
    },
}


def get_json_config(schema: dict) -> dict:
    """Generation config for a schema-constrained JSON reply."""
    return {
        "response_mime_type": "application/json",
        "response_schema": schema,
    }
