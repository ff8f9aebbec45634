"""
Tests for loading YAML deck files in studycore.deck_loader.
"""

from pathlib import Path

import pytest

from studycore.deck_loader import load_deck
from studycore.exceptions import DeckFileError
from studycore.models import Card


def test_load_deck_reads_title_and_cards(spanish_deck: Path):
    deck = load_deck(spanish_deck)
    assert deck.title == "Spanish Basics"
    assert deck.source_file == spanish_deck
    assert deck.cards == [
        Card(id=1, front="Hola", back="Hello"),
        Card(id=2, front="Adios", back="Goodbye"),
        Card(id=42, front="Gracias", back="Thank you"),
    ]


def test_load_deck_accepts_string_path(spanish_deck: Path):
    deck = load_deck(str(spanish_deck))
    assert len(deck.cards) == 3


def test_load_deck_keeps_string_ids(write_deck):
    path = write_deck(
        {"deck": "D", "cards": [{"id": "abc", "q": "Q", "a": "A"}]}
    )
    assert load_deck(path).cards[0].id == "abc"


def test_deck_without_cards_loads_empty(write_deck):
    path = write_deck({"deck": "Empty", "cards": []})
    deck = load_deck(path)
    assert deck.title == "Empty"
    assert deck.cards == []


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(DeckFileError, match="File not found"):
        load_deck(tmp_path / "nope.yaml")


def test_invalid_yaml_raises(write_deck):
    path = write_deck("deck: [unclosed\n")
    with pytest.raises(DeckFileError, match="Invalid YAML syntax") as exc_info:
        load_deck(path)
    assert exc_info.value.file_path == path
    assert exc_info.value.original_exception is not None


def test_top_level_must_be_mapping(write_deck):
    path = write_deck("- just\n- a list\n")
    with pytest.raises(DeckFileError, match="must be a dictionary"):
        load_deck(path)


def test_card_missing_answer_raises(write_deck):
    path = write_deck({"deck": "D", "cards": [{"q": "Only a question"}]})
    with pytest.raises(DeckFileError, match="cards.0.a"):
        load_deck(path)


def test_unknown_card_field_raises(write_deck):
    path = write_deck(
        {"deck": "D", "cards": [{"q": "Q", "a": "A", "hint": "H"}]}
    )
    with pytest.raises(DeckFileError, match="Validation error"):
        load_deck(path)


def test_duplicate_ids_raise(write_deck):
    path = write_deck(
        {
            "deck": "D",
            "cards": [
                {"q": "Q1", "a": "A1"},
                {"id": 1, "q": "Q2", "a": "A2"},
            ],
        }
    )
    with pytest.raises(DeckFileError, match="Duplicate card id 1") as exc_info:
        load_deck(path)
    assert "cards[0] has no id and uses its position 1" in str(exc_info.value)


def test_unnumbered_card_clashing_with_earlier_id(write_deck):
    path = write_deck(
        {
            "deck": "D",
            "cards": [
                {"id": 2, "q": "Q1", "a": "A1"},
                {"q": "Q2", "a": "A2"},
            ],
        }
    )
    with pytest.raises(DeckFileError) as exc_info:
        load_deck(path)
    message = str(exc_info.value)
    assert "Duplicate card id 2 at cards[1]" in message
    assert "its position clashes with cards[0]" in message


def test_repeated_explicit_id(write_deck):
    path = write_deck(
        {
            "deck": "D",
            "cards": [
                {"id": "x", "q": "Q1", "a": "A1"},
                {"id": "x", "q": "Q2", "a": "A2"},
            ],
        }
    )
    with pytest.raises(DeckFileError) as exc_info:
        load_deck(path)
    assert "Duplicate card id 'x' at cards[1]; first used at cards[0]." in str(
        exc_info.value
    )


def test_error_message_names_the_file(write_deck):
    path = write_deck("- a\n", name="broken.yaml")
    with pytest.raises(DeckFileError) as exc_info:
        load_deck(path)
    assert str(exc_info.value).startswith("broken.yaml:")
