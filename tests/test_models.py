"""
Tests for the Pydantic models in studycore.models.
"""

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from studycore.models import Card, NavigationEntry, SessionSummary


class TestCardModel:
    def test_card_creation(self):
        card = Card(id=1, front="Front", back="Back")
        assert card.id == 1
        assert card.front == "Front"
        assert card.back == "Back"

    @pytest.mark.parametrize("card_id", [7, "card-7", uuid4()])
    def test_card_id_is_opaque(self, card_id):
        card = Card(id=card_id, front="Q", back="A")
        assert card.id == card_id

    def test_uuid_id_keeps_its_type(self):
        card_id = uuid4()
        assert isinstance(Card(id=card_id, front="Q", back="A").id, UUID)

    @pytest.mark.parametrize("field", ["front", "back"])
    def test_empty_text_is_rejected(self, field):
        data = {"id": 1, "front": "Q", "back": "A"}
        data[field] = ""
        with pytest.raises(ValidationError):
            Card(**data)

    def test_missing_back_is_rejected(self):
        with pytest.raises(ValidationError):
            Card(id=1, front="Q")

    def test_extra_fields_are_forbidden(self):
        with pytest.raises(ValidationError):
            Card(id=1, front="Q", back="A", deck_id=3)

    def test_card_is_immutable(self):
        card = Card(id=1, front="Q", back="A")
        with pytest.raises(ValidationError):
            card.front = "Changed"

    def test_cards_compare_by_value(self):
        assert Card(id=1, front="Q", back="A") == Card(
            id=1, front="Q", back="A"
        )


def test_navigation_entry_label_is_one_based():
    entry = NavigationEntry(position=0, card_index=3, is_current=True)
    assert entry.label == "1"
    assert entry.is_studied is False


def test_session_summary_rejects_accuracy_above_100():
    with pytest.raises(ValidationError):
        SessionSummary(
            total_cards=1,
            studied_count=1,
            correct_count=1,
            incorrect_count=0,
            accuracy_percent=101,
        )
