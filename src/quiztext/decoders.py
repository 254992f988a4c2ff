from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import InvalidRangeSpec, MalformedAnswerLine
from .models import Answer
from .utils import DEFAULT_SEPARATOR, LineRole, classify_line, validate_separator

_ANSWER_PATTERNS = {
    LineRole.RADIO: re.compile(r"^\(\s*(?P<star>\*)?\s*(?P<value>[^\s)]*)\s*\)\s*(?P<label>.*)$"),
    LineRole.CHECKBOX: re.compile(r"^\[\s*(?P<star>\*)?\s*(?P<value>[^\s\]]*)\s*\]\s*(?P<label>.*)$"),
}
_CLOSING_MARKS = {LineRole.RADIO: ")", LineRole.CHECKBOX: "]"}
_RANGE_LINE_PATTERN = re.compile(r"^\{(?P<spec>[^{}]*)\}\s*(?P<captions>.*)$")
_RANGE_ITEM_PATTERN = re.compile(r"^(?P<start>[+-]?\d+)(?:\s*-\s*(?P<end>[+-]?\d+))?$")

# upper bound on the points a single scale line may expand to
MAX_SCALE_POINTS = 1000


@dataclass(frozen=True)
class RangeLine:
    answers: Tuple[int, ...]
    left_text: str
    right_text: str
    middle_text: Optional[str] = None


def decode_answer_line(line: str, role: Optional[LineRole] = None) -> Answer:
    """Decode a radio or checkbox line such as ``(*val) label``."""
    text = line.strip()
    role = role or classify_line(text)
    pattern = _ANSWER_PATTERNS.get(role)
    if pattern is None:
        raise MalformedAnswerLine("not a radio or checkbox answer line", line=text)

    match = pattern.match(text)
    if not match:
        closing = _CLOSING_MARKS[role]
        if closing not in text:
            raise MalformedAnswerLine(f"missing closing '{closing}'", line=text)
        raise MalformedAnswerLine("answer value must be a single token", line=text)

    name = match.group("label").strip()
    if not name:
        raise MalformedAnswerLine("missing answer label", line=text)
    value = match.group("value") or name
    return Answer(name=name, value=value, correct=bool(match.group("star")))


def expand_range_spec(spec: str) -> List[int]:
    """Expand ``1, 3-5, 7`` into ``[1, 3, 4, 5, 7]`` keeping item order."""
    items = spec.split(",")
    if not spec.strip():
        raise InvalidRangeSpec("empty range spec", line=spec)

    values: List[int] = []
    for raw_item in items:
        item = raw_item.strip()
        if not item:
            raise InvalidRangeSpec("empty item in range spec", line=spec)
        match = _RANGE_ITEM_PATTERN.match(item)
        if not match:
            raise InvalidRangeSpec(f"invalid range item {item!r}", line=spec)
        start = int(match.group("start"))
        end_text = match.group("end")
        if end_text is None:
            values.append(start)
            if len(values) > MAX_SCALE_POINTS:
                raise InvalidRangeSpec(f"range spec lists more than {MAX_SCALE_POINTS} points", line=spec)
            continue
        end = int(end_text)
        step = 1 if start <= end else -1
        if len(values) + abs(end - start) + 1 > MAX_SCALE_POINTS:
            raise InvalidRangeSpec(f"range item {item!r} expands past {MAX_SCALE_POINTS} points", line=spec)
        values.extend(range(start, end + step, step))
    return values


def decode_range_line(line: str, separator: str = DEFAULT_SEPARATOR) -> RangeLine:
    """Decode a scale line such as ``{1-5} left | middle | right``."""
    validate_separator(separator)
    text = line.strip()
    match = _RANGE_LINE_PATTERN.match(text)
    if not match:
        if "}" in text:
            raise MalformedAnswerLine("unexpected '{' inside range spec", line=text)
        raise MalformedAnswerLine("missing closing '}'", line=text)

    try:
        answers = expand_range_spec(match.group("spec"))
    except InvalidRangeSpec as exc:
        raise InvalidRangeSpec(exc.message, line=text) from exc

    segments = [segment.strip() for segment in match.group("captions").split(separator)]
    if len(segments) == 2:
        left, right = segments
        middle = None
    elif len(segments) == 3:
        left, middle, right = segments
    elif len(segments) < 2:
        raise MalformedAnswerLine(f"missing '{separator}' between scale captions", line=text)
    else:
        raise MalformedAnswerLine(
            f"too many '{separator}' separators; expected left{separator}[middle{separator}]right",
            line=text,
        )
    return RangeLine(answers=tuple(answers), left_text=left, right_text=right, middle_text=middle)
