# SPDX-License-Identifier: MIT
"""Ruff strategies — one ruff executable split into logical engines by rule code."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path, PurePath
from typing import Any

from lintbridge.config import EngineSettings, load_settings
from lintbridge.engines.ruff_config import RuffProjectConfig, find_ruff_config_async

# flake8-bandit codes ("S101"), not SIM/SLF/SLOT.
_SECURITY_CODE_RE = re.compile(r"^S\d+$")

# Deprecated in ruff; syntax errors are reported without a code.
_DEPRECATED_CODES = frozenset({"E999"})


def include_patterns(project: RuffProjectConfig, target: str) -> list[str]:
    """Translate a ruff ``include`` list into glob patterns under ``target``.

    Ruff matches a pattern without a slash against file names at any depth, and
    a pattern with a slash against paths relative to the configuration file's
    directory. A rooted pattern whose literal part lies below ``target`` cannot
    be re-rooted and is approximated by its last segment at any depth.
    """
    origin = Path(target).absolute()
    base = origin if origin.is_dir() else origin.parent
    project_root = project.path.absolute().parent

    patterns: dict[str, None] = {}
    for pattern in project.include:
        if "/" not in pattern:
            patterns.setdefault(f"**/{pattern}", None)
            continue
        rooted = project_root / pattern.removeprefix("./")
        try:
            patterns.setdefault(rooted.relative_to(base).as_posix(), None)
        except ValueError:
            patterns.setdefault(f"**/{rooted.name}", None)
    return list(patterns)


class RuffStrategy(ABC):
    """Behavior shared by every ruff-backed strategy."""

    name = "ruff"
    languages: tuple[str, ...] = ("python",)
    default_patterns: tuple[str, ...] = ("**/*.py", "**/*.pyi")
    suffixes: frozenset[str] = frozenset({".py", ".pyi"})

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self._settings = settings

    async def init(self) -> None:
        if self._settings is None:
            self._settings = load_settings()

    @property
    def settings(self) -> EngineSettings:
        if self._settings is None:
            msg = f"{type(self).__name__}.init() has not been awaited"
            raise RuntimeError(msg)
        return self._settings

    def get_name(self) -> str:
        return self.name

    def is_enabled(self) -> bool:
        return self.name not in self.settings.disabled_engines

    async def get_target_patterns(self, target: str | None = None) -> list[str]:
        if target is not None:
            project = await find_ruff_config_async(target)
            if project is not None and project.include:
                return include_patterns(project, target)
        return list(self.default_patterns)

    def get_catalog_config(self) -> dict[str, Any]:
        return {"ruff_bin": self.settings.ruff_bin, "preview": self.settings.preview}

    async def get_run_config(self, target: str | None = None) -> dict[str, Any]:
        config = self.get_catalog_config()
        if target is not None:
            project = await find_ruff_config_async(target)
            if project is not None:
                config["config_file"] = str(project.path)
        return config

    def get_languages(self) -> list[str]:
        return list(self.languages)

    @abstractmethod
    def is_rule_key_supported(self, key: str) -> bool:
        """Whether rule ``key`` belongs to this variant's catalog."""

    def filter_unsupported_paths(self, paths: list[str]) -> list[str]:
        return [p for p in paths if PurePath(p).suffix in self.suffixes]


class PythonRuffStrategy(RuffStrategy):
    """General Python linting: every ruff rule except the security family."""

    name = "ruff"

    def is_rule_key_supported(self, key: str) -> bool:
        return key not in _DEPRECATED_CODES and not _SECURITY_CODE_RE.match(key)


class SecurityRuffStrategy(RuffStrategy):
    """Security linting: only the flake8-bandit rules."""

    name = "ruff-security"
    default_patterns = ("**/*.py",)
    suffixes = frozenset({".py"})

    def is_rule_key_supported(self, key: str) -> bool:
        return bool(_SECURITY_CODE_RE.match(key))
