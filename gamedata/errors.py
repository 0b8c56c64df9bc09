"""
Typed errors raised while turning the puzzle page into a validated game payload.
Each error carries its kind plus optional diagnostics (document offset, text window)
so upstream format drift can be diagnosed from the logs.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds for extraction, parsing and validation."""

    MARKER_NOT_FOUND = "MarkerNotFound"
    UNTERMINATED_LITERAL = "UnterminatedLiteral"
    JSON_SYNTAX_ERROR = "JsonSyntaxError"
    INVALID_SIDES = "InvalidSides"
    INVALID_SOLUTION = "InvalidSolution"
    INVALID_DICTIONARY = "InvalidDictionary"


class GameDataError(ValueError):
    """Base error: the page could not be turned into a valid game payload."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        snippet: str | None = None,
    ) -> None:
        super().__init__(message)
        self.offset = offset
        self.snippet = snippet

    def __str__(self) -> str:
        message = super().__str__()
        if self.offset is not None:
            return f"{message} (offset {self.offset})"
        return message


class MarkerNotFound(GameDataError):
    kind = ErrorKind.MARKER_NOT_FOUND


class UnterminatedLiteral(GameDataError):
    kind = ErrorKind.UNTERMINATED_LITERAL


class JsonSyntaxError(GameDataError):
    kind = ErrorKind.JSON_SYNTAX_ERROR


class PayloadValidationError(GameDataError):
    """Parsed JSON does not have the shape of a game payload."""


class InvalidSides(PayloadValidationError):
    kind = ErrorKind.INVALID_SIDES


class InvalidSolution(PayloadValidationError):
    kind = ErrorKind.INVALID_SOLUTION


class InvalidDictionary(PayloadValidationError):
    kind = ErrorKind.INVALID_DICTIONARY


def text_window(text: str, offset: int, radius: int = 40) -> str:
    """Return up to `radius` characters either side of offset (for log context)."""
    start = max(0, offset - radius)
    return text[start : offset + radius]
