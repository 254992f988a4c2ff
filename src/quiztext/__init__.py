"""Parse the plain-text quiz authoring format into question records."""

from .models import Answer, ChoiceQuestion, Question, QuestionKind, ScaleQuestion
from .errors import InvalidRangeSpec, MalformedAnswerLine, QuizTextError
from .parser import QuizTextParser, parse
from .cli import run_cli
from .converters import export_excel, questions_to_dicts, questions_to_frame, questions_to_json
from .importers import extract_text_from_docx, load_questions, read_quiz_text

__all__ = [
    "Answer",
    "ChoiceQuestion",
    "Question",
    "QuestionKind",
    "ScaleQuestion",
    "QuizTextError",
    "MalformedAnswerLine",
    "InvalidRangeSpec",
    "QuizTextParser",
    "parse",
    "run_cli",
    "export_excel",
    "questions_to_dicts",
    "questions_to_frame",
    "questions_to_json",
    "extract_text_from_docx",
    "load_questions",
    "read_quiz_text",
]
