"""Parser for the plain-text quiz authoring format.

A document is a sequence of blank-line separated blocks. The first line of a
block is the question; the remaining lines are answers and metadata::

    What is 2 + 2?
    ^Yes, that's correct
    <Sorry, that's incorrect
    (3) three
    (*4) four

    Pick the primes
    [*] 2
    [*] 3
    [] 4

    How was the lesson?
    {1-5} boring | okay | great
    -Feedback-
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .decoders import RangeLine, decode_answer_line, decode_range_line
from .errors import MalformedAnswerLine, QuizTextError
from .models import Answer, ChoiceQuestion, Question, QuestionKind, ScaleQuestion
from .utils import (
    ANSWER_ROLES,
    DEFAULT_SEPARATOR,
    Block,
    LineRole,
    SourceLine,
    classify_line,
    split_blocks,
    strip_category,
    strip_marker,
    validate_separator,
)

logger = logging.getLogger(__name__)

_KIND_BY_ROLE = {
    LineRole.RADIO: QuestionKind.RADIO,
    LineRole.CHECKBOX: QuestionKind.CHECKBOX,
    LineRole.RANGE: QuestionKind.RANGE,
}


def _located(exc: QuizTextError, block: Block, line: SourceLine) -> QuizTextError:
    return exc.with_position(line_number=line.number, block_index=block.index)


def _log_ignored(role: LineRole, block: Block, line: SourceLine) -> None:
    logger.debug("Ignoring %s line %d in block %d: %r", role.value, line.number, block.index, line.text)


def assemble_block(block: Block, separator: str = DEFAULT_SEPARATOR) -> Question:
    """Build one question record from a block of trimmed lines."""
    kind: Optional[QuestionKind] = None
    answers: List[Answer] = []
    scale: Optional[RangeLine] = None
    feedback: List[Tuple[LineRole, SourceLine]] = []
    category: Optional[str] = None

    for line in block.body:
        role = classify_line(line.text)

        if role in ANSWER_ROLES:
            line_kind = _KIND_BY_ROLE[role]
            if kind is None:
                kind = line_kind
            elif line_kind is not kind:
                raise MalformedAnswerLine(
                    f"{role.value} line in a {kind.value} question",
                    line=line.text,
                    line_number=line.number,
                    block_index=block.index,
                )
            try:
                if role is LineRole.RANGE:
                    if scale is not None:
                        raise MalformedAnswerLine("duplicate range line", line=line.text)
                    scale = decode_range_line(line.text, separator)
                else:
                    answers.append(decode_answer_line(line.text, role))
            except QuizTextError as exc:
                raise _located(exc, block, line) from exc
        elif role in (LineRole.CORRECT_TEXT, LineRole.INCORRECT_TEXT):
            feedback.append((role, line))
        elif role is LineRole.CATEGORY and scale is not None:
            category = strip_category(line.text)
        else:
            _log_ignored(role, block, line)

    title = block.title.text
    if scale is not None:
        # feedback text has no place on a scale question
        for role, line in feedback:
            _log_ignored(role, block, line)
        return ScaleQuestion(
            question=title,
            answers=scale.answers,
            left_text=scale.left_text,
            right_text=scale.right_text,
            middle_text=scale.middle_text,
            category=category,
        )
    correct_text: Optional[str] = None
    incorrect_text: Optional[str] = None
    for role, line in feedback:
        if role is LineRole.CORRECT_TEXT:
            correct_text = strip_marker(line.text)
        else:
            incorrect_text = strip_marker(line.text)
    if kind is None:
        logger.debug("Block %d has no answer lines; treating it as an empty radio question", block.index)
        kind = QuestionKind.RADIO
    return ChoiceQuestion(
        kind=kind,
        question=title,
        answers=tuple(answers),
        correct_text=correct_text,
        incorrect_text=incorrect_text,
    )


class QuizTextParser:
    """Stateless parser bound to one caption separator for scale lines."""

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = validate_separator(separator)

    def parse(self, document: str) -> List[Question]:
        blocks = split_blocks(document)
        questions = [assemble_block(block, self.separator) for block in blocks]
        logger.debug("Parsed %d question(s)", len(questions))
        return questions


def parse(document: str, *, separator: str = DEFAULT_SEPARATOR) -> List[Question]:
    return QuizTextParser(separator).parse(document)
