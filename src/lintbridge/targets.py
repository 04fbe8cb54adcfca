# SPDX-License-Identifier: MIT
"""Expand a user-specified location into a RuleTarget."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from lintbridge.types import RuleTarget


def build_target(location: str, patterns: Iterable[str]) -> RuleTarget:
    """Glob ``patterns`` under a directory; a file location is taken as-is.

    Paths are absolute so they stay valid whatever working directory the
    engine runs the linter from.
    """
    root = Path(location).absolute()
    if not root.is_dir():
        return RuleTarget(target=location, paths=[str(root)] if root.is_file() else [])

    found: dict[str, None] = {}
    for pattern in patterns:
        for path in sorted(root.glob(pattern)):
            if path.is_file():
                found.setdefault(str(path), None)
    return RuleTarget(target=location, paths=list(found), is_directory=True)
