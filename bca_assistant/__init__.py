"""
BCA Study Assistant.

Curriculum-aware tutoring on top of Gemini: chat with syllabus knowledge,
generated flashcards and quizzes, unit study documents and a C lab.
"""

__version__ = "1.0.0"
