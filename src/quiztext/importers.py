from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .models import Question
from .parser import QuizTextParser
from .utils import DEFAULT_SEPARATOR

try:
    from docx import Document
except ImportError:
    Document = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = (".txt", ".md", ".quiz")
DOCX_SUFFIXES = (".docx",)


def _ensure_docx_available() -> None:
    if Document is None:
        raise ImportError("python-docx is not installed; cannot read Word documents.")


def _ensure_exists(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundError(f"Quiz file not found: {path}")


def read_quiz_text(text_file: str | Path, *, encoding: str = "utf-8-sig") -> str:
    path = Path(text_file)
    _ensure_exists(path)
    with open(path, "r", encoding=encoding) as handle:
        content = handle.read()
    logger.info("Read %d characters from %s", len(content), path)
    return content


def extract_text_from_docx(word_file: str | Path) -> str:
    """Turn Word paragraphs into quiz text; empty paragraphs separate blocks."""
    _ensure_docx_available()
    path = Path(word_file)
    _ensure_exists(path)
    doc = Document(str(path))

    lines: list[str] = []
    for paragraph in doc.paragraphs:
        # soft line breaks inside a paragraph become separate lines
        lines.extend(paragraph.text.strip().splitlines() or [""])
    logger.info("Read %d paragraph line(s) from %s", len(lines), path)
    return "\n".join(lines)


def load_questions(
    quiz_file: str | Path,
    *,
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = "utf-8-sig",
) -> List[Question]:
    path = Path(quiz_file)
    suffix = path.suffix.lower()
    if suffix in DOCX_SUFFIXES:
        text = extract_text_from_docx(path)
    elif suffix in TEXT_SUFFIXES or not suffix:
        text = read_quiz_text(path, encoding=encoding)
    else:
        raise ValueError(f"Unsupported quiz file type '{path.suffix}'.")
    return QuizTextParser(separator).parse(text)
