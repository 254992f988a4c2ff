from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class QuestionKind(str, Enum):
    """Question type, fixed by the marker of the first answer line."""

    RADIO = "radio"
    CHECKBOX = "checkbox"
    RANGE = "range"


@dataclass(frozen=True)
class Answer:
    name: str
    value: str
    correct: bool = False

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"name": self.name, "value": self.value}
        # incorrect answers carry no key at all
        if self.correct:
            data["correct"] = True
        return data


@dataclass(frozen=True)
class ChoiceQuestion:
    """Single-select (radio) or multi-select (checkbox) question."""

    kind: QuestionKind
    question: str
    answers: Tuple[Answer, ...] = ()
    correct_text: Optional[str] = None
    incorrect_text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind not in (QuestionKind.RADIO, QuestionKind.CHECKBOX):
            raise ValueError(f"Choice question cannot be of kind {self.kind!r}")

    @property
    def correct_answers(self) -> Tuple[Answer, ...]:
        return tuple(answer for answer in self.answers if answer.correct)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "kind": self.kind.value,
            "question": self.question,
            "answers": [answer.to_dict() for answer in self.answers],
        }
        if self.correct_text is not None:
            data["correctText"] = self.correct_text
        if self.incorrect_text is not None:
            data["incorrectText"] = self.incorrect_text
        return data


@dataclass(frozen=True)
class ScaleQuestion:
    """Numeric-scale question with captions for the ends of the scale."""

    question: str
    answers: Tuple[int, ...]
    left_text: str
    right_text: str
    middle_text: Optional[str] = None
    category: Optional[str] = None

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.RANGE

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "kind": self.kind.value,
            "question": self.question,
            "answers": list(self.answers),
            "leftText": self.left_text,
        }
        if self.middle_text is not None:
            data["middleText"] = self.middle_text
        data["rightText"] = self.right_text
        if self.category is not None:
            data["category"] = self.category
        return data


Question = Union[ChoiceQuestion, ScaleQuestion]
