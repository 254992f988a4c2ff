import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import quiztext
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


@pytest.fixture
def sample_document():
    """A document with one question of every kind."""
    return (
        "\n"
        "What is 2 + 2?\n"
        "^Yes, that's correct\n"
        "<Sorry, that's incorrect\n"
        "(3) three\n"
        "(*4) four\n"
        "\n"
        "\n"
        "Pick the primes\n"
        "[*] 2\n"
        "[*] 3\n"
        "[] 4\n"
        "\n"
        "How was the lesson?\n"
        "{1-5} boring | okay | great\n"
        "-Feedback-\n"
    )


@pytest.fixture
def sample_file(tmp_path: Path, sample_document: str) -> Path:
    path = tmp_path / "quiz.txt"
    path.write_text(sample_document, encoding="utf-8")
    return path
