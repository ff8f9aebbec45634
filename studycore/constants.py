"""
Static constants for study sessions and their terminal driver.

Key names follow the DOM `KeyboardEvent.key` values so that any presentation
layer can forward raw key events unchanged.
"""
from typing import Dict, Tuple

# Bound keys
KEY_PREVIOUS: str = "ArrowLeft"
KEY_NEXT: str = "ArrowRight"
KEY_FLIP: str = " "

# Commands accepted by the interactive terminal loop.
COMMAND_FLIP: Tuple[str, ...] = ("f", "")
COMMAND_CORRECT: str = "c"
COMMAND_INCORRECT: str = "x"
COMMAND_NEXT: str = "n"
COMMAND_PREVIOUS: str = "p"
COMMAND_JUMP: str = "j"
COMMAND_SHUFFLE: str = "s"
COMMAND_RESET: str = "r"
COMMAND_QUIT: str = "q"

# Choices on the completion screen.
SUMMARY_CHOICES: Dict[str, str] = {
    "a": "Study again",
    "s": "Shuffle & study",
    "q": "Quit",
}
