import random
from pathlib import Path
from typing import Callable, List
from unittest.mock import MagicMock

import pytest
import yaml

from studycore.models import Card
from studycore.study_session import StudySession


@pytest.fixture
def make_cards() -> Callable[[int], List[Card]]:
    """
    Provide a factory building `n` distinct cards with ids 1..n.

    Returns:
        Callable[[int], List[Card]]: Factory returning cards whose fronts are "Question i" and backs "Answer i".
    """

    def _make(n: int) -> List[Card]:
        return [
            Card(id=i, front=f"Question {i}", back=f"Answer {i}")
            for i in range(1, n + 1)
        ]

    return _make


@pytest.fixture
def four_cards(make_cards) -> List[Card]:
    return make_cards(4)


@pytest.fixture
def reversing_rng() -> MagicMock:
    """
    A stand-in random source whose shuffle reverses the list in place.

    Gives shuffles a known, non-identity result for N >= 2.
    """
    rng = MagicMock(spec=random.Random)
    rng.shuffle.side_effect = lambda seq: seq.reverse()
    return rng


@pytest.fixture
def session(four_cards) -> StudySession:
    """A four-card session in file order with a seeded random source."""
    return StudySession(four_cards, rng=random.Random(1234))


@pytest.fixture
def write_deck(tmp_path: Path) -> Callable[..., Path]:
    """
    Provide a helper that writes a deck mapping (or raw text) to a YAML file.

    Returns:
        Callable: `write_deck(content, name="deck.yaml")` returning the file path.
    """

    def _write(content, name: str = "deck.yaml") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def spanish_deck(write_deck) -> Path:
    return write_deck(
        {
            "deck": "Spanish Basics",
            "cards": [
                {"q": "Hola", "a": "Hello"},
                {"q": "Adios", "a": "Goodbye"},
                {"id": 42, "q": "Gracias", "a": "Thank you"},
            ],
        }
    )
