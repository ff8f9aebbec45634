from pathlib import Path
from typing import Optional, Union


class StudyCoreError(Exception):
    """Base exception for studycore errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class StudySessionError(StudyCoreError):
    """Base exception for rejected study session operations."""

    pass


class EmptyDeckError(StudySessionError):
    """Raised when a study session is constructed over zero cards."""

    pass


class OutOfRangeError(StudySessionError):
    """Raised when a jump target lies outside the traversal order."""

    def __init__(self, target: int, total: int):
        super().__init__(
            f"Position {target} is out of range for a session of "
            f"{total} cards (valid: 0..{total - 1})."
        )
        self.target = target
        self.total = total


class DeckFileError(StudyCoreError):
    """Raised when a deck file cannot be read or validated."""

    def __init__(
        self,
        file_path: Union[str, Path],
        message: str,
        original_exception: Optional[Exception] = None,
    ):
        self.file_path = Path(file_path)
        super().__init__(
            f"{self.file_path.name}: {message}",
            original_exception=original_exception,
        )
