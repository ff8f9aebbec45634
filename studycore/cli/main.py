"""
CLI entry point for studycore.
"""

# Standard library imports
import logging
import os
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Local application imports
from studycore.deck_loader import load_deck
from studycore.exceptions import DeckFileError, EmptyDeckError
from studycore.cli._study_logic import study_logic


console = Console()

app = typer.Typer(
    name="studycore",
    help="Studycore: flashcard study sessions in the terminal.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# ---------------------------------------------------------------------------
# Helpers for resolving the deck path (STUDYCORE_DECK envvar)
# ---------------------------------------------------------------------------


def _resolve_deck_path(deck_file: Optional[Path]) -> Path:
    """Resolve the deck file from the argument or STUDYCORE_DECK. Exits on missing."""
    if deck_file is not None:
        return deck_file
    env_val = os.environ.get("STUDYCORE_DECK")
    if env_val:
        return Path(env_val)
    console.print(
        "[bold red]Error: a deck file is required "
        "(or set the STUDYCORE_DECK environment variable).[/bold red]"
    )
    raise typer.Exit(code=1)


_deck_argument = typer.Argument(  # noqa: B008
    None,
    help="Path to a YAML deck file. Falls back to STUDYCORE_DECK env var.",
    envvar="STUDYCORE_DECK",
    show_default=False,
)


@app.callback()
def cli(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    """Studycore: flashcard study sessions in the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# Study command
# ---------------------------------------------------------------------------


@app.command()
def study(
    deck_file: Optional[Path] = _deck_argument,
    shuffle: bool = typer.Option(
        False, "--shuffle", help="Start in a shuffled order."
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for shuffling, for a reproducible order.",
        envvar="STUDYCORE_SEED",
    ),
):
    """Starts an interactive study session over a deck file."""
    deck_path = _resolve_deck_path(deck_file)
    try:
        study_logic(deck_path=deck_path, shuffle=shuffle, seed=seed)
    except DeckFileError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    except EmptyDeckError as e:
        console.print(
            f"[bold red]Error:[/bold red] {escape(str(e))} "
            "Add cards to the deck first."
        )
        raise typer.Exit(code=1) from e


# ---------------------------------------------------------------------------
# Inspect command
# ---------------------------------------------------------------------------


@app.command()
def inspect(
    deck_file: Optional[Path] = _deck_argument,
):
    """Lists the cards of a deck file."""
    deck_path = _resolve_deck_path(deck_file)
    try:
        deck = load_deck(deck_path)
    except DeckFileError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if not deck.cards:
        console.print(
            f"[yellow]Deck '{escape(deck.title)}' has no cards.[/yellow]"
        )
        return

    table = Table(title=f"{escape(deck.title)} ({len(deck.cards)} cards)")
    table.add_column("#", style="dim")
    table.add_column("Id", style="cyan")
    table.add_column("Front", style="green")
    table.add_column("Back", style="blue")
    for number, card in enumerate(deck.cards, start=1):
        table.add_row(
            str(number), escape(str(card.id)), escape(card.front), escape(card.back)
        )
    console.print(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {e}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
