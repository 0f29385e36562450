"""
Typer CLI for the BCA study assistant.

Commands:
    bca serve               - Run the HTTP API
    bca semesters           - List semesters and their status
    bca subjects            - List subjects of a semester
    bca units PPA           - Show a subject's syllabus units
    bca ask PPA "..."       - Ask the subject tutor one question
    bca flashcards PPA      - Generate a flashcard deck
    bca quiz PPA "Loops"    - Generate a multiple-choice quiz
    bca document PPA        - Generate study notes for every unit
    bca run hello.c         - Simulate compiling and running a C file
    bca scan photo.jpg      - Extract C source from an image

Usage:
    bca --help
    bca ask cfoa "What is RAM?" --online
    bca quiz ppa "Pointers" --difficulty Hard --show-answers
"""

from __future__ import annotations

import mimetypes
from pathlib import Path

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from config import get_settings
from bca_assistant import __version__
from bca_assistant.curriculum import get_semester, list_semesters
from bca_assistant.errors import AssistantError
from bca_assistant.gateway import Difficulty, GeminiGateway
from bca_assistant.logging_setup import configure_logging
from bca_assistant.session import initial_state
from bca_assistant.study import StudyService

app = typer.Typer(
    help="BCA study assistant: syllabus-aware tutor, flashcards, quizzes and a C lab",
    no_args_is_help=True,
)
console = Console()

ACTIVE_SEMESTER = 1


def _build_gateway() -> GeminiGateway:
    return GeminiGateway.from_settings(get_settings())


def _build_service(subject: str | None = None, online: bool | None = None) -> StudyService:
    """A one-shot session with semester 1 loaded and, optionally, a subject selected."""
    settings = get_settings()
    service = StudyService(
        gateway=_build_gateway(),
        state=initial_state(online=settings.default_online if online is None else online),
    )
    service.select_semester(ACTIVE_SEMESTER)
    if subject:
        service.select_subject(subject.upper())
    return service


def _fail(exc: Exception) -> None:
    rprint(f"[red]✗[/red] {exc}")
    raise typer.Exit(code=1)


# ========================================
# SERVER
# ========================================


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default: from config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default: from config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "bca_assistant.api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# ========================================
# CURRICULUM
# ========================================


@app.command("semesters")
def show_semesters() -> None:
    """List all semesters."""
    table = Table(title="Semesters")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Subjects", justify="right")

    for semester in list_semesters():
        status = "[green]active[/green]" if semester.is_active else "[dim]coming soon[/dim]"
        table.add_row(str(semester.id), semester.name, status, str(len(semester.subjects)))

    console.print(table)


@app.command("subjects")
def show_subjects(
    semester_id: int = typer.Option(ACTIVE_SEMESTER, "--semester", "-s", help="Semester number"),
) -> None:
    """List the subjects of a semester."""
    semester = get_semester(semester_id)
    if semester is None:
        _fail(f"Semester {semester_id} does not exist")
    if not semester.is_active:
        rprint(f"[yellow]⚠[/yellow] {semester.name} content is being updated. Check back soon!")
        return

    table = Table(title=semester.name)
    table.add_column("ID", style="cyan")
    table.add_column("Code", style="dim")
    table.add_column("Subject")
    table.add_column("Units", justify="right")

    for subject in semester.subjects:
        table.add_row(subject.id.value, subject.code or "", subject.name, str(len(subject.units)))

    console.print(table)


@app.command("units")
def show_units(subject: str = typer.Argument(..., help="Subject id, e.g. PPA")) -> None:
    """Show a subject's syllabus units."""
    try:
        service = _build_service(subject)
    except AssistantError as e:
        _fail(e)

    active = next(s for s in service.state.subjects if s.id == service.state.subject_id)
    rprint(f"[bold]{active.name}[/bold] [dim]{active.code or ''}[/dim]")
    for unit in active.units:
        rprint(f"  {unit.id}  {unit.title}")


# ========================================
# TUTOR
# ========================================


@app.command("ask")
def ask(
    subject: str = typer.Argument(..., help="Subject id, e.g. PPA"),
    message: str = typer.Argument(..., help="Question for the tutor"),
    online: bool = typer.Option(False, "--online", help="Allow web search grounding"),
    notes: Path | None = typer.Option(None, "--notes", "-n", exists=True, dir_okay=False, help="Text file of notes"),
) -> None:
    """Ask the subject tutor one question."""
    try:
        service = _build_service(subject, online=online)
        if notes is not None:
            service.upload_notes(notes.read_text(encoding="utf-8"))
        reply = service.send_message(message)
    except AssistantError as e:
        _fail(e)

    console.print(Markdown(reply.text))
    if reply.sources:
        rprint("\n[bold]Sources[/bold]")
        for uri in reply.sources:
            rprint(f"  [link={uri}]{uri}[/link]")


@app.command("flashcards")
def flashcards(
    subject: str = typer.Argument(..., help="Subject id, e.g. PPA"),
    topic: str = typer.Option("General Concepts", "--topic", "-t", help="Topic to focus on"),
) -> None:
    """Generate a flashcard deck."""
    try:
        deck = _build_service(subject).generate_flashcards(topic)
    except AssistantError as e:
        _fail(e)

    if deck.is_empty:
        rprint("[yellow]⚠[/yellow] No flashcards generated")
        raise typer.Exit(code=1)

    table = Table(title=f"Flashcards: {topic}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Front", style="cyan")
    table.add_column("Back")
    for i, card in enumerate(deck.cards, 1):
        table.add_row(str(i), card.front, card.back)
    console.print(table)


@app.command("quiz")
def quiz(
    subject: str = typer.Argument(..., help="Subject id, e.g. PPA"),
    topic: str = typer.Argument(..., help="Quiz topic"),
    difficulty: Difficulty = typer.Option(Difficulty.MEDIUM, "--difficulty", "-d"),
    show_answers: bool = typer.Option(False, "--show-answers", help="Print answers and explanations"),
) -> None:
    """Generate a multiple-choice quiz."""
    try:
        runner = _build_service(subject).start_quiz(topic, difficulty)
    except AssistantError as e:
        _fail(e)

    if runner.is_empty:
        rprint("[yellow]⚠[/yellow] No quiz questions generated")
        raise typer.Exit(code=1)

    for number, question in enumerate(runner.questions, 1):
        rprint(f"\n[bold]{number}. {question.question}[/bold]")
        for letter, option in zip("ABCD", question.options):
            rprint(f"   {letter}) {option}")
        if show_answers:
            rprint(f"   [green]Answer: {'ABCD'[question.correct_answer_index]}[/green] {question.explanation}")


@app.command("document")
def document(
    subject: str = typer.Argument(..., help="Subject id, e.g. PPA"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write markdown to this file"),
) -> None:
    """Generate study notes covering every unit."""
    try:
        text = _build_service(subject).generate_unit_document()
    except AssistantError as e:
        _fail(e)

    if not text:
        rprint("[yellow]⚠[/yellow] No document generated")
        raise typer.Exit(code=1)

    if output is not None:
        output.write_text(text, encoding="utf-8")
        rprint(f"[green]✓[/green] Wrote {len(text)} characters to {output}")
    else:
        console.print(Markdown(text))


# ========================================
# C LAB
# ========================================


@app.command("run")
def run_program(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="C source file"),
    stdin: str = typer.Option("", "--stdin", help="Input fed to the program"),
) -> None:
    """Simulate compiling and running a C program."""
    try:
        output = _build_service().run_code(source.read_text(encoding="utf-8"), stdin)
    except AssistantError as e:
        _fail(e)

    console.print(Panel(output or "", title=source.name))


@app.command("scan")
def scan(image: Path = typer.Argument(..., exists=True, dir_okay=False, help="Photo of C code")) -> None:
    """Extract C source code from an image."""
    mime_type, _ = mimetypes.guess_type(image.name)
    try:
        code = _build_service().scan_code(image.read_bytes(), mime_type or "")
    except AssistantError as e:
        _fail(e)

    print(code or "")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    rprint(f"[bold]bca-study-assistant[/bold] v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    settings = get_settings()
    configure_logging("WARNING" if settings.log_level == "INFO" else settings.log_level, settings.log_file)
    logger.debug("CLI starting")
    app()


if __name__ == "__main__":
    main()
