from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

DEFAULT_SEPARATOR = "|"
SUPPORTED_SEPARATORS: Tuple[str, ...] = ("|", ",")
_OPTION_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


class LineRole(str, Enum):
    RADIO = "radio"
    CHECKBOX = "checkbox"
    RANGE = "range"
    CORRECT_TEXT = "correct_text"
    INCORRECT_TEXT = "incorrect_text"
    CATEGORY = "category"
    BLANK = "blank"
    TEXT = "text"


ANSWER_ROLES: Tuple[LineRole, ...] = (LineRole.RADIO, LineRole.CHECKBOX, LineRole.RANGE)

_LEADING_ROLES = {
    "(": LineRole.RADIO,
    "[": LineRole.CHECKBOX,
    "{": LineRole.RANGE,
    "^": LineRole.CORRECT_TEXT,
    "<": LineRole.INCORRECT_TEXT,
}


@dataclass(frozen=True)
class SourceLine:
    text: str
    number: int


@dataclass(frozen=True)
class Block:
    """One question block: a title line followed by its body lines."""

    index: int
    title: SourceLine
    body: Tuple[SourceLine, ...]


def validate_separator(separator: str) -> str:
    if separator not in SUPPORTED_SEPARATORS:
        allowed = " or ".join(repr(sep) for sep in SUPPORTED_SEPARATORS)
        raise ValueError(f"Unsupported caption separator {separator!r}; expected {allowed}.")
    return separator


def classify_line(line: str) -> LineRole:
    """Return the role of a body line, judged by its leading character only."""
    text = (line or "").strip()
    if not text:
        return LineRole.BLANK
    role = _LEADING_ROLES.get(text[0])
    if role is not None:
        return role
    if len(text) >= 2 and text[0] == "-" and text[-1] == "-":
        return LineRole.CATEGORY
    return LineRole.TEXT


def strip_marker(line: str) -> str:
    """Drop the one-character marker of a feedback line."""
    return line.strip()[1:].strip()


def strip_category(line: str) -> str:
    return line.strip()[1:-1].strip()


def split_lines(text: str) -> List[str]:
    if not text:
        return []
    return _LINE_BREAK_PATTERN.split(text)


def split_blocks(text: str) -> List[Block]:
    """Group the document into blocks separated by blank lines."""
    blocks: List[Block] = []
    current: List[SourceLine] = []

    def flush() -> None:
        if current:
            blocks.append(Block(index=len(blocks), title=current[0], body=tuple(current[1:])))
            current.clear()

    for number, raw in enumerate(split_lines(text), start=1):
        stripped = raw.strip()
        if not stripped:
            flush()
            continue
        current.append(SourceLine(text=stripped, number=number))
    flush()
    return blocks


def option_letter(position: int) -> str:
    if position < len(_OPTION_LETTERS):
        return _OPTION_LETTERS[position]
    return str(position + 1)


def letters_to_string(letters: Iterable[str]) -> str:
    """Join option labels; multi-character labels need a separator."""
    labels = list(letters)
    if all(len(label) == 1 for label in labels):
        return "".join(labels)
    return ",".join(labels)


def correct_letters(flags: Sequence[bool]) -> str:
    """Labels (A, B, ..., 27, 28) of the positions flagged correct, in position order."""
    return letters_to_string(option_letter(i) for i, flag in enumerate(flags) if flag)
