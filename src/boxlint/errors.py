"""Error hierarchy for boxlint."""

from __future__ import annotations


class BoxlintError(Exception):
    """Base error for all boxlint errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class UnsupportedLanguageError(BoxlintError, ValueError):
    """Raised when analysis is requested for an unknown stylesheet language."""

    def __init__(self, language: str) -> None:
        super().__init__(f"Unsupported language variant: {language!r}")
        self.language = language


class InvalidIssueError(BoxlintError, ValueError):
    """A diagram request is missing required fields or has malformed values."""


class GenerationError(BoxlintError):
    """A diagram generator failed while rendering an issue."""

    def __init__(
        self, issue_type: str, message: str, *, cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.issue_type = issue_type
