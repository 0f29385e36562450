"""
Model Gateway: the only code that talks to Gemini.

Every request kind is one generate_content round trip with no retries.
Failures are logged and turned into an empty or placeholder result so the
caller never sees a transport or parsing fault. The single exception is a
chat turn without a credential, which raises MissingCredentialError.
"""

from __future__ import annotations

import json
import re
from typing import Any, TypeVar

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from loguru import logger
from pydantic import BaseModel, ValidationError

from config import Settings, get_settings
from bca_assistant.errors import MissingCredentialError
from bca_assistant.tutor import prompts
from bca_assistant.tutor.composer import ComposedPrompt

from .models import ChatReply, Difficulty, Flashcard, QuizQuestion
from .schemas import FLASHCARD_SCHEMA, QUIZ_SCHEMA, get_json_config

ModelT = TypeVar("ModelT", bound=BaseModel)

# Transport, API and parsing failures handled at the gateway boundary
GATEWAY_ERRORS = (genai_errors.APIError, httpx.HTTPError, OSError, ValueError)

CHAT_ERROR_TEXT = "Error connecting to AI service. Please check your API key."
CHAT_EMPTY_TEXT = "I couldn't generate a response."
COMPILE_ERROR_TEXT = "Error: could not compile or run the program. Please try again."
SCAN_ERROR_TEXT = "// Error: could not read code from the image. Please try a clearer photo."

_FENCE_RE = re.compile(r"^\s*```[\w+-]*[ \t]*\n?(.*?)\n?```\s*$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a Markdown fence wrapped around the whole reply, if any."""
    match = _FENCE_RE.match(text)
    return match.group(1) if match else text


def extract_sources(response: Any) -> tuple[str, ...]:
    """Web URIs from the first candidate's grounding chunks, first-seen order, no repeats."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ()
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    uris: dict[str, None] = {}
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        if uri:
            uris.setdefault(uri, None)
    return tuple(uris)


class GeminiGateway:
    """
    Gemini client wrapper for chat, study material and the C lab.

    The underlying genai.Client is created lazily on first use, so a missing
    key never fails at construction time.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str = "gemini-2.5-flash",
        flashcard_count: int = 10,
        quiz_question_count: int = 5,
        notes_prefix_limit: int = 5000,
        client: Any | None = None,
    ):
        self.api_key = api_key or None
        self.model_name = model_name
        self.flashcard_count = flashcard_count
        self.quiz_question_count = quiz_question_count
        self.notes_prefix_limit = notes_prefix_limit
        self._client = client

        if not self.api_key:
            logger.warning("No Gemini API key - AI features will return empty results")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GeminiGateway:
        settings = settings or get_settings()
        return cls(
            api_key=settings.gemini_api_key,
            model_name=settings.ai_model,
            flashcard_count=settings.flashcard_count,
            quiz_question_count=settings.quiz_question_count,
            notes_prefix_limit=settings.notes_prefix_limit,
        )

    @property
    def is_available(self) -> bool:
        """Check if the gateway has a credential."""
        return self.api_key is not None

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _generate(self, contents: Any, config: types.GenerateContentConfig | None = None) -> Any:
        return self._get_client().models.generate_content(
            model=self.model_name,
            contents=contents,
            config=config,
        )

    # =========================================================================
    # Chat
    # =========================================================================

    def chat(self, prompt: ComposedPrompt) -> ChatReply:
        """
        Send one chat turn.

        Web search is attached only when the prompt's policy is online, and
        sources are only reported in that case.

        Raises:
            MissingCredentialError: No API key is configured
        """
        if not self.is_available:
            raise MissingCredentialError()

        config = types.GenerateContentConfig(
            system_instruction=prompt.system_instruction,
            tools=[types.Tool(google_search=types.GoogleSearch())] if prompt.online else None,
            thinking_config=types.ThinkingConfig(thinking_budget=0),
        )

        try:
            response = self._generate(prompt.to_contents(), config)
        except GATEWAY_ERRORS as e:
            logger.error(f"Gemini chat failed: {e}")
            return ChatReply(text=CHAT_ERROR_TEXT)

        text = response.text or CHAT_EMPTY_TEXT
        sources = extract_sources(response) if prompt.online else ()
        logger.debug(f"Chat reply: {len(text)} chars, {len(sources)} sources")
        return ChatReply(text=text, sources=sources)

    # =========================================================================
    # Structured batches
    # =========================================================================

    def _generate_batch(self, prompt: str, schema: dict, item_model: type[ModelT], label: str) -> list[ModelT]:
        """Run a schema-constrained request; any defect discards the whole batch."""
        try:
            response = self._generate(prompt, types.GenerateContentConfig(**get_json_config(schema)))
        except GATEWAY_ERRORS as e:
            logger.error(f"{label} generation failed: {e}")
            return []

        return parse_batch(response.text, item_model, label)

    def generate_flashcards(self, topic: str, subject_name: str, notes: str) -> list[Flashcard]:
        if not self.is_available:
            return []
        prompt = prompts.flashcard_prompt(
            topic=topic,
            subject_name=subject_name,
            notes=notes,
            count=self.flashcard_count,
            notes_limit=self.notes_prefix_limit,
        )
        cards = self._generate_batch(prompt, FLASHCARD_SCHEMA, Flashcard, "Flashcard")
        logger.info(f"Generated {len(cards)} flashcards for {subject_name}: {topic}")
        return cards

    def generate_quiz(self, topic: str, subject_name: str, difficulty: Difficulty) -> list[QuizQuestion]:
        if not self.is_available:
            return []
        prompt = prompts.quiz_prompt(
            topic=topic,
            subject_name=subject_name,
            difficulty=Difficulty(difficulty).value,
            count=self.quiz_question_count,
        )
        questions = self._generate_batch(prompt, QUIZ_SCHEMA, QuizQuestion, "Quiz")
        logger.info(f"Generated {len(questions)} quiz questions for {subject_name}: {topic}")
        return questions

    # =========================================================================
    # Free-form text
    # =========================================================================

    def generate_document(self, subject_name: str, unit_titles: list[str]) -> str:
        """Study notes with one '## <unit>' section per unit; empty string on failure."""
        if not self.is_available or not unit_titles:
            return ""
        try:
            response = self._generate(prompts.document_prompt(subject_name, unit_titles))
        except GATEWAY_ERRORS as e:
            logger.error(f"Document generation failed: {e}")
            return ""
        return response.text or ""

    def simulate_compile(self, source: str, stdin: str = "") -> str:
        """Simulated terminal output of compiling and running a C program."""
        if not self.is_available:
            return ""
        try:
            response = self._generate(prompts.compile_prompt(source, stdin))
        except GATEWAY_ERRORS as e:
            logger.error(f"Compile simulation failed: {e}")
            return COMPILE_ERROR_TEXT
        output = strip_code_fences(response.text or "")
        if not output.strip():
            logger.warning("Compile simulation returned no text")
            return COMPILE_ERROR_TEXT
        return output

    def extract_code_from_image(self, image: bytes, mime_type: str) -> str:
        """Raw source code transcribed from a photo or screenshot."""
        if not self.is_available:
            return ""
        contents = [
            types.Part.from_bytes(data=image, mime_type=mime_type),
            prompts.IMAGE_TO_CODE_PROMPT,
        ]
        try:
            response = self._generate(contents)
        except GATEWAY_ERRORS as e:
            logger.error(f"Image-to-code extraction failed: {e}")
            return SCAN_ERROR_TEXT
        code = strip_code_fences(response.text or "")
        if not code.strip():
            logger.warning("Image-to-code extraction returned no text")
            return SCAN_ERROR_TEXT
        return code


def parse_batch(text: str | None, item_model: type[ModelT], label: str = "Batch") -> list[ModelT]:
    """
    Validate a JSON array reply against item_model.

    Returns the full list, or an empty list if the text is missing, is not
    a JSON array, or any single item fails validation.
    """
    if not text:
        logger.warning(f"{label} reply was empty")
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"{label} reply is not valid JSON: {e}")
        return []
    if not isinstance(data, list):
        logger.error(f"{label} reply is not a JSON array")
        return []
    try:
        return [item_model.model_validate(item) for item in data]
    except ValidationError as e:
        logger.error(f"{label} reply failed schema validation: {e.error_count()} errors")
        return []
