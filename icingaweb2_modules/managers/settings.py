#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Manager for merging and rendering INI settings.

Several settings groups may target the same file, and even the same section
(all modules share resources.ini). They are merged in declaration order: keys
are added to the section, and a key written twice with different values is
either an error or overwritten, depending on the `ConflictPolicy`.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import SecretStr

from icingaweb2_modules.config.literals import ConflictPolicy
from icingaweb2_modules.core.resources import ModuleCatalog, SettingsSection, SettingValue
from icingaweb2_modules.exceptions import ConflictingSettingError

logger = logging.getLogger(__name__)

MergedSettings = dict[Path, dict[str, dict[str, SettingValue]]]


def merge_sections(
    sections: Iterable[SettingsSection], policy: ConflictPolicy = ConflictPolicy.FAIL
) -> MergedSettings:
    """Groups sections by target file and section name, merging their keys."""
    merged: MergedSettings = {}
    for section in sections:
        current = merged.setdefault(section.target, {}).setdefault(section.section_name, {})
        for key, value in section.settings.items():
            if key in current and current[key] != value:
                if policy == ConflictPolicy.FAIL:
                    raise ConflictingSettingError(str(section.target), section.section_name, key)
                logger.debug(
                    f"{section.name} overrides '{key}' in [{section.section_name}] of {section.target}"
                )
            current[key] = value
    return merged


def format_value(value: SettingValue) -> str:
    """Formats a value the way Icinga Web 2 writes its INI files."""
    match value:
        case bool():
            return "1" if value else "0"
        case SecretStr():
            raw = value.get_secret_value()
        case _:
            raw = str(value)
    escaped = raw.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_ini(sections: dict[str, dict[str, SettingValue]]) -> str:
    """Renders the sections of a single file."""
    blocks = []
    for name, settings in sections.items():
        lines = [f"[{name}]"]
        lines.extend(f"{key} = {format_value(value)}" for key, value in settings.items())
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def render_files(
    sections: Iterable[SettingsSection], policy: ConflictPolicy = ConflictPolicy.FAIL
) -> dict[Path, str]:
    """Renders the content of every targeted file."""
    return {
        target: render_ini(file_sections)
        for target, file_sections in merge_sections(sections, policy).items()
    }


def render_catalogs(
    *catalogs: ModuleCatalog, policy: ConflictPolicy = ConflictPolicy.FAIL
) -> dict[Path, str]:
    """Renders the files of one or several module catalogs together."""
    sections = [section for catalog in catalogs for section in catalog.sections]
    logger.debug(f"Rendering {len(sections)} settings sections")
    return render_files(sections, policy)
