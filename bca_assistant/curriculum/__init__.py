"""Static curriculum: semesters, subjects, units and reference notes."""

from .models import Semester, SemesterStatus, Subject, SubjectId, Unit
from .store import CHAT_SUGGESTIONS, SEMESTERS, find_subject, get_semester, list_semesters

__all__ = [
    "CHAT_SUGGESTIONS",
    "SEMESTERS",
    "Semester",
    "SemesterStatus",
    "Subject",
    "SubjectId",
    "Unit",
    "find_subject",
    "get_semester",
    "list_semesters",
]
