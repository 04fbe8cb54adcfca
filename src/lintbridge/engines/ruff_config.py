# SPDX-License-Identifier: MIT
"""Nearest ruff configuration lookup, walking up from a target path."""

from __future__ import annotations

import asyncio
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Checked in this order within each directory, like ruff itself.
CONFIG_FILENAMES = (".ruff.toml", "ruff.toml", "pyproject.toml")


@dataclass(frozen=True)
class RuffProjectConfig:
    """A ruff configuration file and the include patterns it declares."""

    path: Path
    include: tuple[str, ...] = ()


def _ruff_section(path: Path) -> dict[str, Any] | None:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if path.name != "pyproject.toml":
        return data
    section = data.get("tool", {}).get("ruff")
    return section if isinstance(section, dict) else None


def find_ruff_config(start: str | Path) -> RuffProjectConfig | None:
    """Return the nearest ruff config at or above ``start``, or None.

    A pyproject.toml only counts when it has a ``[tool.ruff]`` table.

    Raises:
        tomllib.TOMLDecodeError: If a candidate file is not valid TOML.
    """
    origin = Path(start).absolute()
    directory = origin if origin.is_dir() else origin.parent
    for candidate_dir in (directory, *directory.parents):
        for name in CONFIG_FILENAMES:
            candidate = candidate_dir / name
            if not candidate.is_file():
                continue
            section = _ruff_section(candidate)
            if section is None:
                continue
            include = section.get("include") or ()
            return RuffProjectConfig(path=candidate, include=tuple(str(p) for p in include))
    return None


async def find_ruff_config_async(start: str | Path) -> RuffProjectConfig | None:
    """find_ruff_config() in a worker thread."""
    return await asyncio.to_thread(find_ruff_config, start)
