"""Tag scanner for ASCII DXF text.

An ASCII DXF file is a flat sequence of two-line records: an integer group
code followed by its value. This module splits raw text into those records
without attaching any entity semantics.
"""

import math
import re
from dataclasses import dataclass

_CODE_PATTERN = re.compile(r"[+-]?[0-9]+")
_NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True, slots=True)
class TagRecord:
    """One (group code, value) pair.

    Attributes:
        code: Integer group code identifying the value's role
        value: Trimmed value text
    """

    code: int
    value: str


def normalize_newlines(raw: str) -> str:
    """Convert CRLF and lone CR line breaks to LF."""
    return raw.replace("\r\n", "\n").replace("\r", "\n")


def parse_code(text: str) -> int | None:
    """Parse the leading integer of a group code line.

    Args:
        text: Raw code line

    Returns:
        Integer code, or None if the trimmed line does not start with ASCII
            digits or is too long to convert
    """
    match = _CODE_PATTERN.match(text.strip())
    if match is None:
        return None
    try:
        return int(match.group())
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None


def parse_number(text: str) -> float | None:
    """Parse the leading decimal number of a value.

    Args:
        text: Value text

    Returns:
        Finite float, or None if unparsable or not finite
    """
    match = _NUMBER_PATTERN.match(text.strip())
    if match is None:
        return None
    value = float(match.group())
    return value if math.isfinite(value) else None


def scan_tags(raw: str) -> list[TagRecord]:
    """Split raw DXF text into tag records.

    Lines are consumed in consecutive pairs. A pair whose code line is empty
    or not numeric is skipped as a whole; a trailing unpaired line is ignored.

    Args:
        raw: Complete file contents

    Returns:
        Tag records in source order
    """
    lines = normalize_newlines(raw).split("\n")
    records: list[TagRecord] = []

    for i in range(0, len(lines) - 1, 2):
        code = parse_code(lines[i])
        if code is None:
            continue
        records.append(TagRecord(code, lines[i + 1].strip()))

    return records
