import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import DeckFileError
from .models import Card, CardId

logger = logging.getLogger(__name__)


# --- Internal Pydantic Models for Raw YAML Validation ---


class _RawDeckCard(BaseModel):
    id: Optional[Union[int, str]] = Field(default=None)
    q: str = Field(..., min_length=1)
    a: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class _RawDeckFile(BaseModel):
    deck: str = Field(..., min_length=1)
    cards: List[_RawDeckCard] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


@dataclass
class LoadedDeck:
    """A deck title and its cards in file order."""

    title: str
    cards: List[Card] = field(default_factory=list)
    source_file: Optional[Path] = None


def _read_yaml(file_path: Path) -> Any:
    try:
        content = file_path.read_text(encoding="utf-8")
        return yaml.safe_load(content)
    except FileNotFoundError:
        raise DeckFileError(file_path, "File not found.") from None
    except IOError as e:
        raise DeckFileError(
            file_path, f"Could not read file: {e}", original_exception=e
        ) from e
    except yaml.YAMLError as e:
        raise DeckFileError(
            file_path, f"Invalid YAML syntax: {e}", original_exception=e
        ) from e


def _build_cards(file_path: Path, raw_cards: List[_RawDeckCard]) -> List[Card]:
    """
    Turn validated raw entries into Card models.

    Entries without an `id` are identified by their 1-based position in the
    file. Positional and explicit ids share one namespace, so ids must be
    unique across both.
    """
    cards: List[Card] = []
    # id -> (index, whether the id came from the position)
    seen_ids: Dict[CardId, Tuple[int, bool]] = {}
    for idx, raw_card in enumerate(raw_cards):
        positional = raw_card.id is None
        card_id: CardId = idx + 1 if positional else raw_card.id
        if card_id in seen_ids:
            first_idx, first_positional = seen_ids[card_id]
            message = f"Duplicate card id {card_id!r} at cards[{idx}]"
            if first_positional:
                message += (
                    f"; cards[{first_idx}] has no id and uses its position "
                    f"{card_id!r}."
                )
            elif positional:
                message += (
                    f"; this card has no id and its position clashes with "
                    f"cards[{first_idx}]."
                )
            else:
                message += f"; first used at cards[{first_idx}]."
            raise DeckFileError(file_path, message)
        seen_ids[card_id] = (idx, positional)
        cards.append(Card(id=card_id, front=raw_card.q, back=raw_card.a))
    return cards


def load_deck(file_path: Union[str, Path]) -> LoadedDeck:
    """
    Load a YAML deck file into a title and an ordered list of cards.

    Parameters:
        file_path (str | Path): Path to a YAML file with a `deck` title and a
            `cards` list of `{id?, q, a}` entries. A card without `id` takes
            its 1-based position as its id, so an explicit `id: 1` elsewhere
            clashes with an unnumbered first card.

    Returns:
        LoadedDeck: The deck title and its cards in file order. The card list may
        be empty.

    Raises:
        DeckFileError: If the file is missing or unreadable, is not valid YAML,
        does not hold a mapping at the top level, fails schema validation, or
        repeats a card id.
    """
    file_path = Path(file_path)
    raw_content = _read_yaml(file_path)

    if not isinstance(raw_content, dict):
        raise DeckFileError(
            file_path, "Top level of YAML must be a dictionary (deck object)."
        )

    try:
        deck_data = _RawDeckFile.model_validate(raw_content)
    except ValidationError as e:
        error_details = e.errors()[0]
        field_path = ".".join(map(str, error_details["loc"]))
        msg = error_details["msg"]
        raise DeckFileError(
            file_path,
            f"Validation error in field '{field_path}': {msg}",
            original_exception=e,
        ) from e

    cards = _build_cards(file_path, deck_data.cards)
    logger.info(
        f"Loaded deck '{deck_data.deck}' with {len(cards)} cards "
        f"from {file_path}."
    )
    return LoadedDeck(title=deck_data.deck, cards=cards, source_file=file_path)
