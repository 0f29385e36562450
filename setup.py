"""
Setup script for bca-study-assistant.

A syllabus-aware study companion for first-semester BCA students.
It serves three roles:

1. Subject tutor - Chat grounded in per-subject reference notes
2. Practice generator - Flashcards, quizzes and unit study notes
3. C lab - Simulated compile-and-run and code extraction from photos

The 'bca' command is the CLI entry point; 'bca serve' runs the HTTP API.
"""

from setuptools import find_packages, setup

setup(
    name="bca-study-assistant",
    version="1.0.0",
    description="Syllabus-aware AI study assistant for BCA semester 1, backed by Gemini",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["bca_assistant", "bca_assistant.*"]),
    py_modules=["config", "main"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # API
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "python-multipart>=0.0.9",
        # Model
        "google-genai>=1.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # HTTP
        "httpx>=0.25.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bca=bca_assistant.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Framework :: FastAPI",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="bca study tutor flashcards quiz gemini education",
)
