# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Section catalog loader.

Reads the packaged sections.yml into the ordered list of report sections.
"""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from hwreport.utils.config import SECTIONS_CONFIG, ConfigError, get_config_path, load_yaml_config

from .schema import Section, SectionFilter, SectionKind, lshw_class_section

logger = logging.getLogger(__name__)

_FILTER_KEYS = {f.name for f in fields(SectionFilter)}


def load_sections(config_path: Optional[Union[str, Path]] = None) -> List[Section]:
    """
    Load the ordered report sections.

    Args:
        config_path: Optional override of the packaged sections.yml

    Returns:
        Sections in report order

    Raises:
        ConfigError: If the catalog is missing or malformed
    """
    path = Path(config_path) if config_path else get_config_path(SECTIONS_CONFIG)
    raw_config = load_yaml_config(str(path))

    sections = []
    seen = set()
    for entry in raw_config.get("sections", []):
        section = _parse_section(entry, path)
        if section.name in seen:
            raise ConfigError(f"Duplicate section '{section.name}' in {path}")
        seen.add(section.name)
        sections.append(section)

    logger.debug(f"Loaded {len(sections)} report sections from {path}")
    return sections


def _parse_section(entry: Dict[str, Any], path: Path) -> Section:
    if not isinstance(entry, dict) or "name" not in entry:
        raise ConfigError(f"Section entry without a name in {path}: {entry!r}")

    name = str(entry["name"])
    try:
        kind = SectionKind(entry.get("kind", SectionKind.COMMAND.value))
    except ValueError:
        raise ConfigError(f"Unknown kind '{entry.get('kind')}' for section '{name}' in {path}")

    if kind == SectionKind.LSHW_CLASS:
        return lshw_class_section(entry.get("class", name))

    command = entry.get("command")
    if not command or not isinstance(command, list):
        raise ConfigError(f"Section '{name}' in {path} needs a command list")

    return Section(
        name=name,
        title=str(entry.get("title", name)),
        command=[str(arg) for arg in command],
        kind=kind,
        filter=_parse_filter(entry.get("filter") or {}, name, path),
        subject=entry.get("subject"),
    )


def _parse_filter(data: Dict[str, Any], name: str, path: Path) -> SectionFilter:
    unknown = set(data) - _FILTER_KEYS
    if unknown:
        raise ConfigError(f"Unknown filter keys {sorted(unknown)} for section '{name}' in {path}")

    section_filter = SectionFilter(**data)
    section_filter.include = [str(pattern) for pattern in section_filter.include]
    if section_filter.fields_from is not None:
        section_filter.fields_from = int(section_filter.fields_from)
        if section_filter.fields_from < 1:
            raise ConfigError(f"fields_from must be >= 1 for section '{name}' in {path}")
    return section_filter
