"""
Prompt templates for every request kind sent to Gemini.

Chat answers follow exactly one AnswerPolicy, chosen by the online flag.
Batch prompts (flashcards, quiz, document) and the C lab prompts are plain
templates filled by the factory functions at the bottom of this module.
"""
from __future__ import annotations

from enum import Enum

# =============================================================================
# Knowledge Injection
# =============================================================================

KNOWLEDGE_SECTION_TEMPLATE = """

[INTERNAL KNOWLEDGE BASE]:
{knowledge_base}

[USER NOTES]:
{notes}"""


# =============================================================================
# Answer Policies (Chat)
# =============================================================================

OFFLINE_POLICY = """

INSTRUCTION: You are a tutor. Answer the user's question DIRECTLY and CONCISELY using the information provided in the Internal Knowledge Base above.
- DO NOT say "Based on the syllabus", "According to the notes", or "The text mentions".
- Pretend you already know this information.
- If the user asks for a specific definition (e.g., "What is getchar?"), give the definition immediately without preamble or qualifying language.
- If the user asks something subjective (e.g., "What is the hardest topic?", "Give me a summary"), use your own judgment over the material and answer. Never refuse such a request.
- If the information is missing, state "I don't have specific information on that topic in my current database, but generally..." and provide a standard answer."""

ONLINE_POLICY = """

INSTRUCTION: Answer the user's question. You may use Google Search to supplement your knowledge, but prioritize the Internal Knowledge Base definitions if they conflict with what you find. Do not cite the syllabus document itself, just give the answer."""


class AnswerPolicy(str, Enum):
    """How the tutor may source its answers."""

    OFFLINE = "offline"  # Injected knowledge only
    ONLINE = "online"  # Injected knowledge plus live web search

    @classmethod
    def for_mode(cls, online: bool) -> AnswerPolicy:
        return cls.ONLINE if online else cls.OFFLINE

    @property
    def instruction(self) -> str:
        return ONLINE_POLICY if self is AnswerPolicy.ONLINE else OFFLINE_POLICY

    @property
    def uses_search(self) -> bool:
        return self is AnswerPolicy.ONLINE


# =============================================================================
# Study Material Prompts
# =============================================================================

FLASHCARD_PROMPT = """Generate {count} high-quality flashcards for {subject_name}, specifically focusing on: {topic}.
Each card has a short question or term on the front, a clear answer or definition on the back, and the sub-topic it belongs to.
Use the provided context notes if relevant: {notes}"""

QUIZ_PROMPT = """Create a {difficulty} level quiz with {count} questions for {subject_name} about {topic}.
Every question has exactly 4 options, the 0-based index of the correct option, and a short explanation of why that answer is correct."""

DOCUMENT_PROMPT = """Write exam-oriented study notes for {subject_name}.
Cover the following units in this order:
{unit_list}

Start each unit with a Markdown header of the form "## <unit title>" using the unit title exactly as given.
Under each header give key definitions, important points and likely exam questions."""


# =============================================================================
# C Lab Prompts
# =============================================================================

COMPILE_PROMPT = """Act as a C compiler and runtime (gcc on Linux).
Compile and run the program below. If stdin is provided, feed it to the program exactly as given.
Return ONLY what the terminal would show: the program's output, or the compiler errors if it does not compile.
Do not add explanations, commentary, or Markdown code fences.

Program:
{source}

stdin:
{stdin}"""

IMAGE_TO_CODE_PROMPT = """Extract the source code shown in this image.
Return ONLY the raw code exactly as written, with original indentation.
Do not add explanations, commentary, or Markdown code fences."""


# =============================================================================
# Prompt Factory
# =============================================================================


def knowledge_section(knowledge_base: str, notes: str) -> str:
    """Delimited knowledge block, or an empty string if there is nothing to inject."""
    if not (knowledge_base or notes):
        return ""
    return KNOWLEDGE_SECTION_TEMPLATE.format(knowledge_base=knowledge_base, notes=notes)


def flashcard_prompt(topic: str, subject_name: str, notes: str, count: int, notes_limit: int) -> str:
    """Flashcard request; notes are cut to the first notes_limit characters."""
    return FLASHCARD_PROMPT.format(
        count=count,
        subject_name=subject_name,
        topic=topic,
        notes=notes[:notes_limit],
    )


def quiz_prompt(topic: str, subject_name: str, difficulty: str, count: int) -> str:
    return QUIZ_PROMPT.format(
        difficulty=difficulty,
        count=count,
        subject_name=subject_name,
        topic=topic,
    )


def document_prompt(subject_name: str, unit_titles: list[str]) -> str:
    unit_list = "\n".join(f"- {title}" for title in unit_titles)
    return DOCUMENT_PROMPT.format(subject_name=subject_name, unit_list=unit_list)


def compile_prompt(source: str, stdin: str = "") -> str:
    return COMPILE_PROMPT.format(source=source, stdin=stdin or "(none)")
