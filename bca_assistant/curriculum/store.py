"""
Static curriculum store.

The syllabus table for the BCA programme. Only Semester I is published;
later semesters are listed so the selector can show them as upcoming.
"""

from __future__ import annotations

from .knowledge import BC_NOTES, CFOA_NOTES, MATHS_NOTES, POM_NOTES, PPA_NOTES
from .models import Semester, SemesterStatus, Subject, SubjectId, Unit


def _units(*titles: str) -> tuple[Unit, ...]:
    return tuple(Unit(id=f"u{i}", title=title) for i, title in enumerate(titles, start=1))


SEMESTER_ONE_SUBJECTS: tuple[Subject, ...] = (
    Subject(
        id=SubjectId.PPA,
        name="Prog. Principle & Algorithm",
        code="BCA-S102T",
        icon="fa-code",
        description="C Language, Algorithms, and Logic.",
        knowledge_base=PPA_NOTES,
        units=_units(
            "Unit I: Introduction to C & Algorithms",
            "Unit II: Operators & Expressions",
            "Unit III: Control Structures (If/Loops)",
            "Unit IV: Arrays & Strings",
            "Unit V: Functions & Recursion",
            "Unit VI: Pointers & Structures",
        ),
        system_instruction=(
            "You are a C Programming tutor. Answer directly and technically. "
            "You know the details of getchar, putchar, scanf, printf, loops, and arrays. "
            "If asked about input/output functions, be specific about the difference "
            "between formatted (scanf) and unformatted (getchar) functions. "
            "Do not use phrases like 'According to the syllabus'. Just give the answer."
        ),
    ),
    Subject(
        id=SubjectId.CFOA,
        name="Computer Fund. & Office Auto.",
        code="BCA-S101T",
        icon="fa-desktop",
        description="Computer Basics, DOS, Windows, Office.",
        knowledge_base=CFOA_NOTES,
        units=_units(
            "Unit I: Introduction to Computers",
            "Unit II: Algorithm & Flowcharts",
            "Unit III: Operating System (DOS)",
            "Unit IV: Windows Environment",
            "Unit V: Word Processing",
            "Unit VI: Spreadsheets & Presentations",
        ),
        system_instruction=(
            "You are a Computer Fundamentals tutor. Answer directly. You know DOS commands "
            "(Internal/External), Computer Generations, and Office tools. Provide specific "
            "command syntax when asked. Do not mention 'based on notes'. Answer with authority."
        ),
    ),
    Subject(
        id=SubjectId.POM,
        name="Principle of Management",
        code="BCA-S103",
        icon="fa-sitemap",
        description="Planning, Organizing, Leadership.",
        knowledge_base=POM_NOTES,
        units=_units(
            "Unit I: Nature of Management",
            "Unit II: Evolution of Mgt. Thought",
            "Unit III: Planning & Organizing",
            "Unit IV: Directing & Controlling",
            "Unit V: Motivation & Leadership",
            "Unit VI: Communication & Change",
        ),
        system_instruction=(
            "You are a Management professor. Answer directly. Explain theories "
            "(Maslow, Fayol, Taylor) clearly. Do not reference the syllabus document "
            "in your text. Speak naturally as a teacher."
        ),
    ),
    Subject(
        id=SubjectId.BC,
        name="Business Communication",
        code="BCA-S104",
        icon="fa-comments",
        description="Communication skills, Letters, Reports.",
        knowledge_base=BC_NOTES,
        units=_units(
            "Unit I: Basics of Communication",
            "Unit II: Verbal & Non-Verbal",
            "Unit III: Barriers to Communication",
            "Unit IV: Business Letters",
            "Unit V: Report Writing",
            "Unit VI: Employment Comm.",
        ),
        system_instruction=(
            "You are a Business Communication expert. Answer directly. Focus on the 7Cs, "
            "letter formats, and communication barriers. Do not say 'The notes say...'. "
            "Just state the facts."
        ),
    ),
    Subject(
        id=SubjectId.MATHS,
        name="Mathematics - I",
        code="BCA-S105",
        icon="fa-calculator",
        description="Determinants, Matrices, Calculus.",
        knowledge_base=MATHS_NOTES,
        units=_units(
            "Unit I: Determinants & Matrices",
            "Unit II: Limits & Continuity",
            "Unit III: Differentiation",
            "Unit IV: Integration",
            "Unit V: Vector Algebra",
        ),
        system_instruction=(
            "You are a Math tutor. Provide step-by-step solutions. "
            "Use LaTeX formatting for math. Answer directly."
        ),
    ),
)

SEMESTERS: tuple[Semester, ...] = (
    Semester(id=1, name="Semester I", status=SemesterStatus.ACTIVE, subjects=SEMESTER_ONE_SUBJECTS),
    Semester(id=2, name="Semester II", status=SemesterStatus.COMING_SOON),
    Semester(id=3, name="Semester III", status=SemesterStatus.COMING_SOON),
    Semester(id=4, name="Semester IV", status=SemesterStatus.COMING_SOON),
    Semester(id=5, name="Semester V", status=SemesterStatus.COMING_SOON),
    Semester(id=6, name="Semester VI", status=SemesterStatus.COMING_SOON),
)

# Starter prompts offered on an empty transcript
CHAT_SUGGESTIONS: tuple[str, ...] = (
    "Summarize Unit 1",
    "Important questions for exam",
    "Explain the hardest topic",
    "Create a study plan",
)


def list_semesters() -> tuple[Semester, ...]:
    return SEMESTERS


def get_semester(semester_id: int) -> Semester | None:
    for semester in SEMESTERS:
        if semester.id == semester_id:
            return semester
    return None


def find_subject(subject_id: SubjectId | str) -> Subject | None:
    """Look up a subject template across every semester."""
    for semester in SEMESTERS:
        subject = semester.get_subject(subject_id)
        if subject is not None:
            return subject
    return None
