"""
Pydantic models exchanged between the study session and its collaborators.
"""

from __future__ import annotations

from typing import Tuple, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

CardId = Union[int, UUID, str]


class Card(BaseModel):
    """
    A front/back text pair supplied by the card source.

    Immutable for the lifetime of a study session; identity is by `id`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: CardId = Field(
        ...,
        description="Opaque identifier assigned by the card source.",
    )
    front: str = Field(
        ...,
        min_length=1,
        description="Question text shown before the card is flipped.",
    )
    back: str = Field(
        ...,
        min_length=1,
        description="Answer text revealed by flipping the card.",
    )


class NavigationEntry(BaseModel):
    """One slot of the quick-navigation strip."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    position: int = Field(..., ge=0, description="Index into the order.")
    card_index: int = Field(..., ge=0, description="Index into the cards.")
    is_current: bool = False
    is_studied: bool = False

    @property
    def label(self) -> str:
        """1-based label used by jump buttons."""
        return str(self.position + 1)


class SessionSnapshot(BaseModel):
    """
    Read-only view of a study session for rendering.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    position: int = Field(..., ge=0)
    revealed: bool
    studied_count: int = Field(..., ge=0)
    correct_count: int = Field(..., ge=0)
    incorrect_count: int = Field(..., ge=0)
    completed: bool
    order: Tuple[int, ...]
    is_shuffled: bool
    total_cards: int = Field(..., ge=1)
    progress_percent: float = Field(..., ge=0, le=100)


class SessionSummary(BaseModel):
    """Results shown once a study session completes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_cards: int = Field(..., ge=1)
    studied_count: int = Field(..., ge=0)
    correct_count: int = Field(..., ge=0)
    incorrect_count: int = Field(..., ge=0)
    accuracy_percent: int = Field(..., ge=0, le=100)

    @property
    def total_judgments(self) -> int:
        """Number of correct/incorrect judgments, revisits included."""
        return self.correct_count + self.incorrect_count
