import random
from pathlib import Path
from typing import Optional

from studycore.cli.study_ui import start_study_flow
from studycore.deck_loader import load_deck
from studycore.study_session import StudySession


def study_logic(
    deck_path: Path,
    shuffle: bool = False,
    seed: Optional[int] = None,
):
    """
    Load a deck file and start an interactive study session over it.

    Parameters:
        deck_path (Path): YAML deck file to study.
        shuffle (bool): Start in a shuffled order instead of file order.
        seed (Optional[int]): Seed for the shuffle random source, for
            reproducible orders.

    Raises:
        DeckFileError: If the deck file cannot be loaded.
        EmptyDeckError: If the deck holds no cards.
    """
    deck = load_deck(deck_path)
    rng = random.Random(seed) if seed is not None else None
    session = StudySession(deck.cards, rng=rng)
    if shuffle:
        session.shuffle()

    start_study_flow(session, deck.title)
