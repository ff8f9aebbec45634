"""
Key-to-operation dispatch for study sessions.

Input handlers forward key presses here; each bound key becomes one direct
call on the active StudySession.
"""

import logging
from enum import Enum
from typing import Union

from .constants import KEY_FLIP, KEY_NEXT, KEY_PREVIOUS
from .study_session import StudySession

logger = logging.getLogger(__name__)


class StudyKey(str, Enum):
    """Keys bound during an active study session."""

    Previous = KEY_PREVIOUS
    Next = KEY_NEXT
    Flip = KEY_FLIP


def handle_key(
    session: StudySession,
    key: Union[StudyKey, str],
    in_text_input: bool = False,
) -> bool:
    """
    Apply a key press to the session.

    Left arrow steps back, right arrow advances (completing the session on the
    last card) and space flips the card. Keys are ignored while focus is in a
    text input and once the session has completed.

    Parameters:
        session (StudySession): The active session.
        key (StudyKey | str): The pressed key, as a StudyKey or its raw name.
        in_text_input (bool): Whether focus is inside a text field.

    Returns:
        bool: True if the key was consumed, False if it was ignored.
    """
    if in_text_input or session.completed:
        return False

    try:
        study_key = StudyKey(key)
    except ValueError:
        return False

    if study_key is StudyKey.Previous:
        session.previous()
    elif study_key is StudyKey.Next:
        session.next()
    else:
        session.flip()
    logger.debug(f"Handled key {study_key.name}.")
    return True
