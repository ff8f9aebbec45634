"""Studycore - flashcard study sessions as a small in-memory state machine."""

from .models import Card, NavigationEntry, SessionSnapshot, SessionSummary
from .exceptions import (
    DeckFileError,
    EmptyDeckError,
    OutOfRangeError,
    StudyCoreError,
    StudySessionError,
)
from .study_session import StudySession
from .keyboard import StudyKey, handle_key
from .deck_loader import LoadedDeck, load_deck

__all__ = [
    "Card",
    "NavigationEntry",
    "SessionSnapshot",
    "SessionSummary",
    "DeckFileError",
    "EmptyDeckError",
    "OutOfRangeError",
    "StudyCoreError",
    "StudySessionError",
    "StudySession",
    "StudyKey",
    "handle_key",
    "LoadedDeck",
    "load_deck",
]
