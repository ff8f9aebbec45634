"""
Tests for key-to-operation dispatch in studycore.keyboard.
"""

import pytest

from studycore.keyboard import StudyKey, handle_key
from studycore.study_session import StudySession


def test_right_arrow_advances(session: StudySession):
    assert handle_key(session, "ArrowRight") is True
    assert session.position == 1


def test_left_arrow_steps_back(session: StudySession):
    session.jump_to(2)
    assert handle_key(session, StudyKey.Previous) is True
    assert session.position == 1


def test_space_flips(session: StudySession):
    assert handle_key(session, " ") is True
    assert session.revealed is True
    handle_key(session, StudyKey.Flip)
    assert session.revealed is False


def test_right_arrow_on_last_card_completes(session: StudySession):
    session.jump_to(3)
    handle_key(session, StudyKey.Next)
    assert session.completed is True
    assert session.position == 3


def test_keys_ignored_in_text_input(session: StudySession):
    assert handle_key(session, StudyKey.Next, in_text_input=True) is False
    assert handle_key(session, StudyKey.Flip, in_text_input=True) is False
    assert session.position == 0
    assert session.revealed is False


def test_keys_ignored_once_completed(session: StudySession):
    session.jump_to(3)
    session.next()
    assert handle_key(session, StudyKey.Previous) is False
    assert session.position == 3


@pytest.mark.parametrize("key", ["Enter", "a", "ArrowUp", ""])
def test_unbound_keys_are_ignored(session: StudySession, key):
    assert handle_key(session, key) is False
    assert session.position == 0
    assert session.revealed is False
