"""
This module defines the StudySession class, the in-memory state machine behind
a single study attempt over a fixed list of cards. It owns traversal order,
flip state, per-card judgments, shuffling and completion detection. It performs
no I/O; fetching cards and rendering state belong to its callers.
"""

import logging
import math
import random
from typing import FrozenSet, List, Optional, Sequence, Set, Tuple

from .exceptions import EmptyDeckError, OutOfRangeError
from .models import Card, NavigationEntry, SessionSnapshot, SessionSummary

logger = logging.getLogger(__name__)


class StudySession:
    """
    Manages one study attempt over a fixed, ordered list of cards.

    This class is responsible for:
    - Walking the cards in a traversal order (identity or shuffled).
    - Tracking whether the back of the current card is revealed.
    - Recording correct/incorrect judgments and which cards were judged.
    - Detecting completion, either by covering every card or by advancing
      past the last position.

    Every operation is an immediate, synchronous transition. Rejected
    operations raise before touching any state.
    """

    def __init__(
        self, cards: Sequence[Card], rng: Optional[random.Random] = None
    ):
        """
        Create a session over `cards` in their supplied order.

        Parameters:
            cards (Sequence[Card]): Non-empty ordered card list from the card source.
            rng (Optional[random.Random]): Random source used by shuffles; a fresh
                unseeded `random.Random` when omitted.

        Raises:
            EmptyDeckError: If `cards` is empty.
        """
        if not cards:
            raise EmptyDeckError("Cannot start a study session with no cards.")

        self._cards: Tuple[Card, ...] = tuple(cards)
        self._rng = rng if rng is not None else random.Random()
        self._order: List[int] = list(range(len(self._cards)))
        self._position = 0
        self._revealed = False
        self._studied: Set[int] = set()
        self._correct_count = 0
        self._incorrect_count = 0
        self._completed = False
        self._is_shuffled = False
        logger.info(f"Study session created with {len(self._cards)} cards.")

    # --- Read-only state ---

    @property
    def cards(self) -> Tuple[Card, ...]:
        return self._cards

    @property
    def total_cards(self) -> int:
        return len(self._cards)

    @property
    def order(self) -> Tuple[int, ...]:
        return tuple(self._order)

    @property
    def position(self) -> int:
        return self._position

    @property
    def revealed(self) -> bool:
        return self._revealed

    @property
    def studied(self) -> FrozenSet[int]:
        return frozenset(self._studied)

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def incorrect_count(self) -> int:
        return self._incorrect_count

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def is_shuffled(self) -> bool:
        return self._is_shuffled

    # --- Traversal ---

    def current_card(self) -> Optional[Card]:
        """
        Return the card at the current position.

        Returns:
            Card | None: `cards[order[position]]`, or None once the session has completed.
        """
        if self._completed:
            return None
        return self._cards[self._order[self._position]]

    def flip(self) -> bool:
        """Toggle which side of the current card is shown and return the new value."""
        self._revealed = not self._revealed
        return self._revealed

    def next(self) -> None:
        """
        Advance to the next position, or complete the session on the last one.

        There is no wraparound: calling this on the last position latches
        `completed` and leaves `position` where it is.
        """
        if self._position < len(self._cards) - 1:
            self._position += 1
            self._revealed = False
            logger.debug(f"Moved to position {self._position}.")
        else:
            self._mark_completed("advanced past the last card")

    def previous(self) -> None:
        """Step back one position. No-op on the first position."""
        if self._position > 0:
            self._position -= 1
            self._revealed = False
            logger.debug(f"Moved back to position {self._position}.")

    def jump_to(self, target_position: int) -> None:
        """
        Move directly to `target_position` in the traversal order.

        Raises:
            TypeError: If `target_position` is not an int (bools included).
            OutOfRangeError: If `target_position` is outside `[0, N)`.
        """
        if isinstance(target_position, bool) or not isinstance(
            target_position, int
        ):
            logger.warning(f"Rejected jump to non-integer {target_position!r}.")
            raise TypeError(
                f"Jump target must be an int, got "
                f"{type(target_position).__name__}."
            )
        if not 0 <= target_position < len(self._cards):
            logger.warning(f"Rejected jump to position {target_position}.")
            raise OutOfRangeError(target_position, len(self._cards))
        self._position = target_position
        self._revealed = False
        logger.debug(f"Jumped to position {self._position}.")

    # --- Judgments ---

    def judge(self, correct: bool) -> None:
        """
        Record a judgment for the current card and advance.

        The caller is expected to have flipped the card first; this is a usage
        contract and is not enforced here. Re-judging a card after navigating
        back bumps the counters again but does not grow `studied`.

        Parameters:
            correct (bool): True for a correct answer, False for an incorrect one.
        """
        card_index = self._order[self._position]
        if correct:
            self._correct_count += 1
        else:
            self._incorrect_count += 1
        self._studied.add(card_index)
        logger.debug(
            f"Card {self._cards[card_index].id} judged "
            f"{'correct' if correct else 'incorrect'}."
        )

        self.next()
        if len(self._studied) == len(self._cards):
            self._mark_completed("every card has been judged")

    def mark_correct(self) -> None:
        self.judge(True)

    def mark_incorrect(self) -> None:
        self.judge(False)

    # --- Reordering and restarts ---

    def shuffle(self) -> None:
        """
        Shuffle with the semantics of the state the session is in.

        On a completed session this starts a fresh shuffled pass
        (`restart_shuffled`); otherwise it reorders the traversal while keeping
        progress (`reshuffle_remaining`).
        """
        if self._completed:
            self.restart_shuffled()
        else:
            self.reshuffle_remaining()

    def reshuffle_remaining(self) -> None:
        """
        Replace the traversal order with a new random permutation, keeping progress.

        `studied`, both counters and `completed` are preserved; the position
        returns to 0 and the card is shown front first.
        """
        self._apply_new_permutation()
        logger.info("Traversal order reshuffled; progress kept.")

    def restart_shuffled(self) -> None:
        """Begin a new pass in a new random order, discarding all recorded progress."""
        self._clear_progress()
        self._apply_new_permutation()
        logger.info("Study session restarted in shuffled order.")

    def reset(self) -> None:
        """Restart the session in the original card order with no progress."""
        self._order = list(range(len(self._cards)))
        self._is_shuffled = False
        self._position = 0
        self._revealed = False
        self._clear_progress()
        logger.info("Study session reset.")

    def _apply_new_permutation(self) -> None:
        new_order = list(range(len(self._cards)))
        # random.shuffle is an in-place Fisher-Yates over the whole list.
        self._rng.shuffle(new_order)
        self._order = new_order
        self._is_shuffled = True
        self._position = 0
        self._revealed = False

    def _clear_progress(self) -> None:
        self._studied = set()
        self._correct_count = 0
        self._incorrect_count = 0
        self._completed = False

    def _mark_completed(self, reason: str) -> None:
        if not self._completed:
            self._completed = True
            logger.info(
                f"Study session completed ({reason}): "
                f"{self._correct_count} correct, "
                f"{self._incorrect_count} incorrect."
            )

    # --- Derived queries ---

    def progress_percent(self) -> float:
        """Share of cards judged at least once, as `100 * |studied| / N`."""
        return 100 * len(self._studied) / len(self._cards)

    def accuracy_percent(self) -> int:
        """
        Percentage of correct judgments, rounded half up.

        Returns:
            int: 0 when nothing has been judged yet.
        """
        total = self._correct_count + self._incorrect_count
        if total == 0:
            return 0
        return math.floor(100 * self._correct_count / total + 0.5)

    def is_first(self) -> bool:
        return self._position == 0

    def is_last(self) -> bool:
        return self._position == len(self._cards) - 1

    def snapshot(self) -> SessionSnapshot:
        """Capture the current state for rendering."""
        return SessionSnapshot(
            position=self._position,
            revealed=self._revealed,
            studied_count=len(self._studied),
            correct_count=self._correct_count,
            incorrect_count=self._incorrect_count,
            completed=self._completed,
            order=tuple(self._order),
            is_shuffled=self._is_shuffled,
            total_cards=len(self._cards),
            progress_percent=self.progress_percent(),
        )

    def summary(self) -> SessionSummary:
        """Build the results block shown on the completion screen."""
        return SessionSummary(
            total_cards=len(self._cards),
            studied_count=len(self._studied),
            correct_count=self._correct_count,
            incorrect_count=self._incorrect_count,
            accuracy_percent=self.accuracy_percent(),
        )

    def navigation_strip(self) -> List[NavigationEntry]:
        """
        Describe every position of the traversal order for quick navigation.

        Returns:
            List[NavigationEntry]: One entry per position, flagging the current
            position and the cards already judged.
        """
        return [
            NavigationEntry(
                position=position,
                card_index=card_index,
                is_current=position == self._position,
                is_studied=card_index in self._studied,
            )
            for position, card_index in enumerate(self._order)
        ]
