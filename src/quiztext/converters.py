from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pandas as pd

from .models import ChoiceQuestion, Question, ScaleQuestion
from .utils import correct_letters

FRAME_COLUMNS = [
    "number",
    "kind",
    "question",
    "options",
    "answer",
    "correct_text",
    "incorrect_text",
    "left_text",
    "middle_text",
    "right_text",
    "category",
]


def questions_to_dicts(questions: Iterable[Question]) -> list[dict[str, object]]:
    return [question.to_dict() for question in questions]


def questions_to_json(questions: Iterable[Question], *, indent: Optional[int] = 2) -> str:
    return json.dumps(questions_to_dicts(questions), ensure_ascii=False, indent=indent)


def default_output_path(input_path: str | Path, ext: str) -> Path:
    base, _ = os.path.splitext(str(input_path))
    return Path(f"{base}{ext}")


def save_json(
    questions: Sequence[Question],
    output_path: str | Path,
    *,
    indent: Optional[int] = 2,
) -> Path:
    output = Path(output_path)
    output.write_text(questions_to_json(questions, indent=indent) + "\n", encoding="utf-8")
    return output


def _choice_row(question: ChoiceQuestion) -> dict[str, object]:
    options = ", ".join(
        answer.name if answer.value == answer.name else f"{answer.name} ({answer.value})"
        for answer in question.answers
    )
    return {
        "options": options,
        "answer": correct_letters([answer.correct for answer in question.answers]),
        "correct_text": question.correct_text,
        "incorrect_text": question.incorrect_text,
    }


def _scale_row(question: ScaleQuestion) -> dict[str, object]:
    return {
        "options": ", ".join(str(point) for point in question.answers),
        "left_text": question.left_text,
        "middle_text": question.middle_text,
        "right_text": question.right_text,
        "category": question.category,
    }


def questions_to_frame(questions: Iterable[Question]) -> pd.DataFrame:
    """Flatten parsed questions into one table row per question."""
    rows: list[dict[str, object]] = []
    for question in questions:
        row: dict[str, object] = {
            "number": len(rows) + 1,
            "kind": question.kind.value,
            "question": question.question,
        }
        if isinstance(question, ScaleQuestion):
            row.update(_scale_row(question))
        else:
            row.update(_choice_row(question))
        rows.append(row)
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def export_excel(
    questions: Sequence[Question],
    output_xlsx_path: str | Path,
    sheet_name: str = "questions",
) -> Path:
    output = Path(output_xlsx_path)
    df = questions_to_frame(questions)
    df.to_excel(output, index=False, sheet_name=sheet_name)
    return output
