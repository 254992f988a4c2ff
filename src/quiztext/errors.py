from __future__ import annotations

from typing import Optional


class QuizTextError(ValueError):
    """Base error for quiz text that cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        line: str = "",
        line_number: Optional[int] = None,
        block_index: Optional[int] = None,
    ) -> None:
        self.message = message
        self.line = line
        self.line_number = line_number
        self.block_index = block_index
        super().__init__(self._format())

    def _format(self) -> str:
        where = []
        if self.block_index is not None:
            where.append(f"block {self.block_index + 1}")
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        prefix = f"{', '.join(where)}: " if where else ""
        suffix = f" ({self.line!r})" if self.line else ""
        return f"{prefix}{self.message}{suffix}"

    def with_position(self, *, line_number: Optional[int], block_index: Optional[int]) -> "QuizTextError":
        """Return a copy of the error located at the given line and block."""
        return type(self)(
            self.message,
            line=self.line,
            line_number=line_number,
            block_index=block_index,
        )


class MalformedAnswerLine(QuizTextError):
    """An answer or range line does not follow its marker grammar."""


class InvalidRangeSpec(QuizTextError):
    """A brace spec holds a non-integer token or a broken range item."""
