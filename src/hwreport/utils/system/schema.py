# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Report section schema.

A section pairs a header with one external command and the fixed text
filter applied to that command's standard output.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

LSHW_CLASS_FIELDS = ["product:", "vendor:", "version:"]


class SectionKind(Enum):
    """How a section obtains and prints its body."""
    COMMAND = "command"
    LSHW_CLASS = "lshw_class"
    DISK_HEALTH = "disk_health"


@dataclass
class SectionFilter:
    """Line filter applied to a command's output."""
    include: List[str] = field(default_factory=list)
    ignore_case: bool = False
    whole_word: bool = False
    strip: bool = False
    skip_header: bool = False
    fields_from: Optional[int] = None
    remove_brackets: bool = False
    unique: bool = False
    pair_lines: bool = False


@dataclass
class Section:
    """A single report section."""
    name: str
    title: str
    command: List[str]
    kind: SectionKind = SectionKind.COMMAND
    filter: SectionFilter = field(default_factory=SectionFilter)
    subject: Optional[str] = None

    @property
    def tool(self) -> str:
        """The external binary this section depends on."""
        return self.command[0]

    @property
    def placeholder_subject(self) -> str:
        return self.subject or self.title


def lshw_class_section(class_name: str) -> Section:
    """Build the section reporting one lshw hardware class."""
    return Section(
        name=class_name,
        title=class_name,
        command=["lshw", "-class", class_name],
        kind=SectionKind.LSHW_CLASS,
        filter=SectionFilter(include=list(LSHW_CLASS_FIELDS), strip=True, pair_lines=True),
        subject=class_name,
    )
