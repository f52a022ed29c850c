# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Two-Line Element text parsing.

Scans free-form text for element line pairs, with or without a
preceding name line, and returns them as ordered records.

TLE format: https://celestrak.org/NORAD/documentation/tle-fmt.php
Each entry is an optional name line followed by line 1 and line 2.
No external dependencies — only stdlib dataclasses/logging.
"""
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LINE1_MARKER = "1 "
LINE2_MARKER = "2 "
LINE1_MIN_LENGTH = 20  # line 1 must be strictly longer than this


@dataclass(frozen=True)
class ElementRecord:
    """One element set as found in the input text."""
    id: int
    name: str
    line1: str
    line2: str


def _is_line1(line: str) -> bool:
    return line.startswith(LINE1_MARKER) and len(line) > LINE1_MIN_LENGTH


def _is_element_line(line: str) -> bool:
    return line.startswith(LINE1_MARKER) or line.startswith(LINE2_MARKER)


def parse_element_text(text: str) -> list[ElementRecord]:
    """
    Parse multi-line TLE text into element records.

    Lines are trimmed and blank lines dropped. A line 1 only counts when
    the very next line is a line 2; otherwise it is skipped and scanning
    resumes on the following line. The line just before line 1 becomes
    the name unless it is itself an element line, in which case the
    name is ``SAT-<n>`` with n the 1-based output position.

    Args:
        text: Raw text, e.g. pasted from CelesTrak.

    Returns:
        Records with ids 0..k-1 in order of discovery. Empty if the text
        holds no valid pair; callers report that to the user.
    """
    lines = [line.strip() for line in text.split("\n")]
    lines = [line for line in lines if line]

    records: list[ElementRecord] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if not _is_line1(line):
            i += 1
            continue

        line2 = lines[i + 1] if i + 1 < len(lines) else None
        if line2 is None or not line2.startswith(LINE2_MARKER):
            logger.debug("Discarding unpaired element line: %r", line)
            i += 1
            continue

        name = f"SAT-{len(records) + 1}"
        if i > 0 and not _is_element_line(lines[i - 1]):
            name = lines[i - 1]

        records.append(ElementRecord(
            id=len(records),
            name=name,
            line1=line,
            line2=line2,
        ))
        i += 2

    return records
