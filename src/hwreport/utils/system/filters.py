# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Text filters applied to external command output.

Each step mirrors a classic text utility so the report shows the same
fields an administrator would get from the equivalent pipeline:

- skip_header       awk 'NR>1'
- include           grep -E [-i] [-w]
- fields_from       cut -d' ' -f N-
- remove_brackets   sed 's/\\[.*\\]//'
- strip             sed 's/^[ \\t]*//'
- unique            uniq
- pair_lines        join lines two at a time with "; "

Steps run in the order listed above.
"""

import re
from typing import Iterable, List, Optional, Pattern

from .schema import SectionFilter

PAIR_SEPARATOR = "; "

_BRACKETS = re.compile(r"\[.*\]")


def apply_filter(text: str, section_filter: SectionFilter) -> List[str]:
    """
    Filter command output into the lines to print.

    Args:
        text: Raw standard output
        section_filter: Filter definition

    Returns:
        Lines to print, without trailing newlines
    """
    lines = text.splitlines()

    if section_filter.skip_header:
        lines = lines[1:]

    pattern = compile_include_pattern(
        section_filter.include,
        ignore_case=section_filter.ignore_case,
        whole_word=section_filter.whole_word,
    )
    if pattern is not None:
        lines = [line for line in lines if pattern.search(line)]

    if section_filter.fields_from is not None:
        lines = [cut_fields(line, section_filter.fields_from) for line in lines]

    if section_filter.remove_brackets:
        lines = [_BRACKETS.sub("", line, count=1) for line in lines]

    if section_filter.strip:
        lines = [line.lstrip(" \t") for line in lines]

    if section_filter.unique:
        lines = collapse_adjacent_duplicates(lines)

    if section_filter.pair_lines:
        lines = pair_lines(lines)

    return lines


def compile_include_pattern(
    patterns: List[str], ignore_case: bool = False, whole_word: bool = False
) -> Optional[Pattern]:
    """Build a single regex matching any of the include patterns, or None when there are none."""
    if not patterns:
        return None

    expression = "|".join(f"(?:{p})" for p in patterns)
    if whole_word:
        expression = rf"(?<!\w)(?:{expression})(?!\w)"
    return re.compile(expression, re.IGNORECASE if ignore_case else 0)


def cut_fields(line: str, start: int, delimiter: str = " ") -> str:
    """
    Keep the delimiter-separated fields from ``start`` (1-based) onward.

    Lines without the delimiter pass through unchanged.
    """
    if delimiter not in line:
        return line
    return delimiter.join(line.split(delimiter)[start - 1:])


def collapse_adjacent_duplicates(lines: Iterable[str]) -> List[str]:
    collapsed = []
    for line in lines:
        if not collapsed or collapsed[-1] != line:
            collapsed.append(line)
    return collapsed


def pair_lines(lines: List[str]) -> List[str]:
    """Join lines two at a time; a trailing odd line stands alone."""
    return [PAIR_SEPARATOR.join(lines[i:i + 2]) for i in range(0, len(lines), 2)]
