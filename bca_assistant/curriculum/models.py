"""
Curriculum data model: semesters, subjects and syllabus units.

Templates are immutable. A session keeps its own working copy of each
subject's units so completion flags can change without touching the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class SubjectId(str, Enum):
    """Identity of a curriculum subject."""

    MATHS = "MATHS"
    PPA = "PPA"  # Programming Principle & Algorithm
    POM = "POM"  # Principles of Management
    BC = "BC"  # Business Communication
    CFOA = "CFOA"  # Computer Fundamental & Office Automation


class SemesterStatus(str, Enum):
    """Publication state of a semester."""

    ACTIVE = "active"
    COMING_SOON = "coming_soon"


@dataclass(frozen=True)
class Unit:
    """One syllabus topic, trackable as complete/incomplete."""

    id: str
    title: str
    is_completed: bool = False

    def toggled(self) -> Unit:
        return replace(self, is_completed=not self.is_completed)


@dataclass(frozen=True)
class Subject:
    """One course with its own persona, knowledge text and units."""

    id: SubjectId
    name: str
    icon: str
    description: str
    system_instruction: str
    units: tuple[Unit, ...] = ()
    code: str | None = None
    knowledge_base: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary (knowledge text omitted)."""
        return {
            "id": self.id.value,
            "name": self.name,
            "code": self.code,
            "icon": self.icon,
            "description": self.description,
            "units": [
                {"id": u.id, "title": u.title, "is_completed": u.is_completed}
                for u in self.units
            ],
            "has_knowledge_base": bool(self.knowledge_base),
        }


@dataclass(frozen=True)
class Semester:
    """A semester groups the subjects studied together."""

    id: int
    name: str
    status: SemesterStatus
    subjects: tuple[Subject, ...] = field(default_factory=tuple)

    @property
    def is_active(self) -> bool:
        return self.status == SemesterStatus.ACTIVE

    def get_subject(self, subject_id: SubjectId | str) -> Subject | None:
        for subject in self.subjects:
            if subject.id == subject_id:
                return subject
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "subject_count": len(self.subjects),
        }
