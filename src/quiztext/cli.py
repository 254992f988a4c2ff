from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .converters import default_output_path, export_excel, questions_to_json, save_json
from .errors import QuizTextError
from .importers import load_questions
from .utils import DEFAULT_SEPARATOR, SUPPORTED_SEPARATORS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert plain-text quiz files into structured questions")
    parser.add_argument("input", help="quiz file (.txt, .md, .quiz or .docx)")
    parser.add_argument(
        "--separator",
        choices=SUPPORTED_SEPARATORS,
        default=DEFAULT_SEPARATOR,
        help="caption separator used by scale lines",
    )
    parser.add_argument("--format", choices=("json", "xlsx"), default="json", help="output format")
    parser.add_argument("-o", "--output", help="output file; JSON goes to stdout when omitted")
    parser.add_argument("--encoding", default="utf-8-sig", help="encoding of text input files (a UTF-8 BOM is dropped)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parser.add_argument("-v", "--verbose", action="store_true", help="log parser details")
    return parser


def run_cli(args: Optional[list[str]] = None) -> int:
    ns = build_parser().parse_args(args)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        questions = load_questions(ns.input, separator=ns.separator, encoding=ns.encoding)
    except (FileNotFoundError, ImportError, QuizTextError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if ns.format == "xlsx":
        output = ns.output or default_output_path(ns.input, ".xlsx")
        path = export_excel(questions, output)
        print(f"Wrote {len(questions)} question(s) to {path}")
    elif ns.output:
        path = save_json(questions, ns.output, indent=ns.indent)
        print(f"Wrote {len(questions)} question(s) to {path}")
    else:
        print(questions_to_json(questions, indent=ns.indent))
    logger.debug("Converted %s with separator %r", ns.input, ns.separator)
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
