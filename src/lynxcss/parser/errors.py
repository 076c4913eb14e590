"""Parser error types."""

from __future__ import annotations

from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken


class ParseError(Exception):
    """Raised when CSS source cannot be parsed.

    ``line`` and ``column`` are 1-based, or None when lark could not place
    the error (typically at end of input).
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"line {self.line}, column {self.column}: {message}"

    @classmethod
    def from_lark(cls, exc: UnexpectedInput) -> ParseError:
        """Build a one-line error from a lark exception."""
        if isinstance(exc, UnexpectedEOF):
            message = "unexpected end of input"
        elif isinstance(exc, UnexpectedToken):
            if exc.token.type == "$END":
                message = "unexpected end of input"
            else:
                message = f"unexpected {str(exc.token)!r}"
        elif isinstance(exc, UnexpectedCharacters):
            message = f"unexpected character {exc.char!r}"
        else:
            message = "invalid syntax"

        line = exc.line if isinstance(exc.line, int) and exc.line > 0 else None
        column = exc.column if line is not None else None
        return cls(message, line=line, column=column)
