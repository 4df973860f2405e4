"""Command-line interface for tsundoku.

Built with Typer for commands and Rich for output.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from tsundoku.client import TsundokuClient, resolve_book
from tsundoku.config import get_settings
from tsundoku.core.dates import format_published_date
from tsundoku.core.exceptions import TsundokuError
from tsundoku.core.models import BookRecord
from tsundoku.core.types import PipelineOutcome
from tsundoku.db.session import DatabaseManager
from tsundoku.log import configure_logging
from tsundoku.services.resolution import PipelineResult

app = typer.Typer(
    name="tsundoku",
    help="Populate a book database from ISBNs via Google Books and OpenLibrary.",
    no_args_is_help=True,
)

console = Console()

QUIT_COMMAND = "q"
PROMPT = " -> "


# ============================================================================
# Helper Functions
# ============================================================================


def is_declined(answer: str) -> bool:
    """An answer starting with n/N declines; anything else accepts."""
    return answer.strip().lower().startswith("n")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def format_book_table(record: BookRecord) -> Table:
    """Create a rich table for a resolved record."""
    table = Table(title=record.title, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    published = format_published_date(record.published_date) if record.published_date else ""
    for label, value in (
        ("Subtitle", record.subtitle),
        ("Authors", record.authors),
        ("Publisher", record.publisher),
        ("Published", published),
        ("Categories", record.categories),
        ("ISBN-10", record.isbn_10),
        ("ISBN-13", record.isbn_13),
        ("Source", record.source.value),
    ):
        if value:
            table.add_row(label, value)
    return table


def report(result: PipelineResult) -> None:
    """Print the outcome of one resolution."""
    if result.outcome == PipelineOutcome.CREATED:
        print_success(f"({result.record_id}) Created record for: '{result.title}'")
    elif result.outcome == PipelineOutcome.SKIPPED:
        print_info(f"Skipped: {result.title}")
    elif result.outcome == PipelineOutcome.EXISTING:
        print_info(f"Title: '{result.title}' found already.")
    else:
        print_info(f"No records found for: {result.isbn}")


def confirm_record(record: BookRecord) -> bool:
    """Ask whether a fetched record should be stored."""
    console.print(format_book_table(record))
    console.print(f"Title: '{record.title}' found. Process this?")
    return not is_declined(console.input(PROMPT))


# ============================================================================
# Interactive Session
# ============================================================================


async def handle_line(client: TsundokuClient, line: str) -> PipelineResult:
    """Resolve one typed ISBN, asking before overriding an existing match."""
    result = await client.resolve(line, confirm=confirm_record)

    if result.outcome == PipelineOutcome.EXISTING:
        console.print(f"Title: '{result.title}' found already.")
        console.print("Skip? (default) or add?")
        if is_declined(console.input(PROMPT)):
            result = await client.resolve(line, force=True, confirm=confirm_record)
        else:
            print_info(f"Skipped: {result.title} - ({result.isbn})")
            return result

    report(result)
    return result


async def _populate() -> None:
    settings = get_settings()

    console.rule("Book Populator")
    console.print("Please enter ISBN ('q' to quit):")

    async with TsundokuClient(settings) as client:
        while True:
            try:
                line = console.input(PROMPT)
            except EOFError:
                break

            if line.strip() == QUIT_COMMAND:
                console.print("Quit")
                break

            try:
                await handle_line(client, line)
            except TsundokuError as e:
                print_error(e.message)


# ============================================================================
# Commands
# ============================================================================


@app.command()
def populate() -> None:
    """Read ISBNs interactively and store each resolved book."""
    configure_logging(get_settings().log_level)
    asyncio.run(_populate())


@app.command()
def resolve(
    isbn: str = typer.Argument(..., help="ISBN-10 or ISBN-13"),
    force: bool = typer.Option(False, "--force", "-f", help="Add even if already stored"),
) -> None:
    """Resolve and store a single ISBN without prompting."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        result = asyncio.run(resolve_book(isbn, force=force, settings=settings))
    except TsundokuError as e:
        print_error(e.message)
        raise typer.Exit(1)

    if result.record is not None:
        console.print(format_book_table(result.record))
    report(result)
    if not result.found:
        raise typer.Exit(1)


@app.command("init-db")
def init_db() -> None:
    """Create the books table if it does not exist."""
    settings = get_settings()
    configure_logging(settings.log_level)

    async def _run() -> None:
        async with DatabaseManager(settings.database_url) as db:
            await db.create_schema()

    asyncio.run(_run())
    print_success("Database schema ready")


if __name__ == "__main__":
    app()
