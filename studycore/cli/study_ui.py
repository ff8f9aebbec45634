"""
Command-line interface for studying a deck.
"""

import logging

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from studycore.constants import (
    COMMAND_CORRECT,
    COMMAND_FLIP,
    COMMAND_INCORRECT,
    COMMAND_JUMP,
    COMMAND_NEXT,
    COMMAND_PREVIOUS,
    COMMAND_QUIT,
    COMMAND_RESET,
    COMMAND_SHUFFLE,
    SUMMARY_CHOICES,
)
from studycore.exceptions import OutOfRangeError
from studycore.study_session import StudySession

logger = logging.getLogger(__name__)
console = Console()

_CARD_PROMPT = (
    "[bold]f[/bold]lip  [bold]c[/bold]orrect  in[bold]x[/bold]orrect  "
    "[bold]n[/bold]ext  [bold]p[/bold]rev  [bold]j N[/bold] jump  "
    "[bold]s[/bold]huffle  [bold]r[/bold]eset  [bold]q[/bold]uit: "
)


def _render_status(session: StudySession) -> None:
    """Print the position header and the progress line."""
    snapshot = session.snapshot()
    title = f"Card {snapshot.position + 1} of {snapshot.total_cards}"
    if snapshot.is_shuffled:
        title += " (shuffled)"
    console.rule(f"[bold]{title}[/bold]")

    status = (
        f"{snapshot.studied_count} studied • "
        f"{round(snapshot.progress_percent)}% complete"
    )
    if snapshot.correct_count or snapshot.incorrect_count:
        status += (
            f" • ✓{snapshot.correct_count} ✗{snapshot.incorrect_count}"
        )
    console.print(status, style="dim")


def _render_card(session: StudySession) -> None:
    """Show the visible side of the current card."""
    card = session.current_card()
    if card is None:
        return
    if session.revealed:
        console.print(Panel(Text(card.back), title="Back", border_style="blue"))
    else:
        console.print(
            Panel(Text(card.front), title="Front", border_style="green")
        )


def _render_navigation(session: StudySession) -> None:
    """Print the quick-navigation strip for decks with more than one card."""
    if session.total_cards <= 1:
        return
    strip = Text("Jump: ")
    for entry in session.navigation_strip():
        if entry.is_current:
            style = "bold reverse"
        elif entry.is_studied:
            style = "green"
        else:
            style = "dim"
        strip.append(f"[{entry.label}]", style=style)
        strip.append(" ")
    console.print(strip)


def _jump(session: StudySession, argument: str) -> None:
    try:
        target = int(argument)
    except ValueError:
        console.print(
            "[bold red]Invalid jump. Use 'j N' with a card number.[/bold red]"
        )
        return
    try:
        session.jump_to(target - 1)
    except OutOfRangeError:
        console.print(
            f"[bold red]No card {target}. "
            f"Choose 1 to {session.total_cards}.[/bold red]"
        )


def _judge(session: StudySession, correct: bool) -> None:
    if not session.revealed:
        console.print(
            "[yellow]Show the answer before marking the card.[/yellow]"
        )
        return
    session.judge(correct)


def _apply_command(session: StudySession, command: str) -> bool:
    """
    Apply one prompt command to the session.

    Returns:
        bool: False when the user asked to quit, True otherwise.
    """
    name, _, argument = command.partition(" ")
    if name == COMMAND_QUIT:
        return False
    if name in COMMAND_FLIP:
        session.flip()
    elif name == COMMAND_CORRECT:
        _judge(session, True)
    elif name == COMMAND_INCORRECT:
        _judge(session, False)
    elif name == COMMAND_NEXT:
        session.next()
    elif name == COMMAND_PREVIOUS:
        session.previous()
    elif name == COMMAND_JUMP:
        _jump(session, argument.strip())
    elif name == COMMAND_SHUFFLE:
        session.shuffle()
    elif name == COMMAND_RESET:
        session.reset()
    else:
        console.print(
            f"[bold red]Unknown command: '{escape(command)}'.[/bold red]"
        )
    return True


def _display_summary(session: StudySession, deck_title: str) -> None:
    summary = session.summary()
    console.print(
        Panel(
            f"You've reviewed all {summary.total_cards} cards in "
            f'"{escape(deck_title)}"',
            title="Study Session Complete!",
            border_style="cyan",
        )
    )
    results = Table(title="Results", show_header=False)
    results.add_column("Metric", style="cyan")
    results.add_column("Value", style="magenta")
    results.add_row("Correct", str(summary.correct_count))
    results.add_row("Incorrect", str(summary.incorrect_count))
    results.add_row("Accuracy", f"{summary.accuracy_percent}%")
    console.print(results)


def _handle_completion(session: StudySession, deck_title: str) -> bool:
    """
    Show the results and ask how to continue.

    Returns:
        bool: True if a new pass was started, False if the user quit.
    """
    _display_summary(session, deck_title)
    prompt = "  ".join(
        f"[bold]{key}[/bold]: {label}" for key, label in SUMMARY_CHOICES.items()
    )
    while True:
        choice = console.input(f"{prompt}? ").strip().lower()
        if choice == "a":
            session.reset()
            return True
        if choice == "s":
            session.restart_shuffled()
            return True
        if choice == "q":
            return False
        console.print(
            "[bold red]Invalid choice. Enter a, s or q.[/bold red]"
        )


def start_study_flow(session: StudySession, deck_title: str) -> None:
    """
    Run the interactive study loop until the user quits.

    Args:
        session: A freshly constructed StudySession.
        deck_title: Deck title shown in headers and the summary.
    """
    console.print(
        f"[bold cyan]Studying '{escape(deck_title)}' "
        f"({session.total_cards} cards)...[/bold cyan]"
    )
    while True:
        if session.completed:
            if not _handle_completion(session, deck_title):
                break
            continue

        _render_status(session)
        _render_card(session)
        _render_navigation(session)
        command = console.input(_CARD_PROMPT).strip().lower()
        if not _apply_command(session, command):
            logger.info("Study session ended by the user.")
            break
        console.print("")

    console.print("[bold cyan]Study session finished.[/bold cyan]")
