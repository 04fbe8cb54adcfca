# SPDX-License-Identifier: MIT
"""RuffRunner — the ruff executable behind the LintRunner protocol.

Registry comes from ``ruff rule --all --output-format json``; runs use
``ruff check --output-format json``. Ruff has no per-rule severity, so the
level from the ``rules`` config map becomes the native message severity.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from lintbridge.engines.native import (
    NativeFileResult,
    NativeFix,
    NativeMessage,
    NativeReport,
    NativeRule,
)

logger = logging.getLogger(__name__)

RUFF_DOCS_URL = "https://docs.astral.sh/ruff/rules"

# Ruff's own default selection.
DEFAULT_SELECTION = ("E4", "E7", "E9", "F")

# Groups ruff refuses (removed) or warns about (deprecated) in --select.
_UNSELECTABLE_GROUPS = frozenset({"removed", "deprecated"})

_LEVELS: dict[Any, int] = {"off": 0, "warn": 1, "error": 2, 0: 0, 1: 1, 2: 2}


class RuffError(Exception):
    """Raised when the ruff executable fails or its output cannot be parsed."""


# --- Raw ruff JSON ---


class _RuffRuleEntry(BaseModel):
    name: str
    code: str | None = None
    linter: str | None = None
    summary: str | None = None
    preview: bool = False
    status: Any = None
    url: str | None = None

    @property
    def group(self) -> str:
        """Lower-cased rule group: stable, preview, deprecated or removed."""
        status = self.status
        # Newer releases tag the group with extra data, e.g. {"Stable": {...}}.
        if isinstance(status, dict) and len(status) == 1:
            status = next(iter(status))
        if isinstance(status, str):
            return status.lower()
        return "preview" if self.preview else "stable"


class _RuffLocation(BaseModel):
    row: int
    column: int


class _RuffFix(BaseModel):
    message: str | None = None
    applicability: str | None = None


class _RuffDiagnostic(BaseModel):
    code: str | None = None
    message: str
    filename: str
    location: _RuffLocation
    end_location: _RuffLocation | None = None
    fix: _RuffFix | None = None


_RULE_LIST = TypeAdapter(list[_RuffRuleEntry])
_DIAGNOSTIC_LIST = TypeAdapter(list[_RuffDiagnostic])


def is_recommended(code: str) -> bool:
    """True for codes ruff enables without any configuration."""
    return any(
        code.startswith(prefix) and code[len(prefix) :][:1].isdigit()
        for prefix in DEFAULT_SELECTION
    )


def rule_level(level: Any) -> int:
    """Normalize a rules-map level ("off"/"warn"/"error" or 0/1/2) to 0-2."""
    try:
        return _LEVELS[level]
    except (KeyError, TypeError):
        msg = f"Invalid rule level: {level!r}"
        raise ValueError(msg) from None


class RuffRunner:
    """One ruff configuration: cwd, selected rules, optional config file."""

    def __init__(self, config: Mapping[str, Any]) -> None:
        self.ruff_bin: str = config.get("ruff_bin") or "ruff"
        self.cwd: str | None = config.get("cwd")
        self.config_file: str | None = config.get("config_file")
        self.preview: bool = bool(config.get("preview"))
        self.levels: dict[str, int] = {
            code: rule_level(level) for code, level in dict(config.get("rules") or {}).items()
        }
        self._rules: dict[str, NativeRule] | None = None

    def _run(self, args: list[str]) -> str:
        cmd = [self.ruff_bin, *args]
        try:
            result = subprocess.run(cmd, cwd=self.cwd, capture_output=True, text=True, check=False)
        except OSError as e:
            msg = f"Failed to run {self.ruff_bin}: {e}"
            raise RuffError(msg) from e
        if result.returncode != 0:
            msg = (
                f"Command {' '.join(cmd[:2])} failed with exit code {result.returncode}: "
                f"{result.stderr.strip()}"
            )
            raise RuffError(msg)
        return result.stdout

    def _is_selectable(self, entry: _RuffRuleEntry) -> bool:
        group = entry.group
        if group in _UNSELECTABLE_GROUPS:
            return False
        return self.preview or group != "preview"

    def get_rules(self) -> dict[str, NativeRule]:
        """Native registry keyed by rule code, memoized for this runner.

        Only rules this configuration can select are listed: entries without a
        code, removed and deprecated rules are skipped, and preview rules are
        kept only when preview mode is on.
        """
        if self._rules is None:
            output = self._run(["rule", "--all", "--output-format", "json"])
            try:
                entries = _RULE_LIST.validate_json(output)
            except ValidationError as e:
                msg = f"Unexpected output from ruff rule: {e.error_count()} validation errors"
                raise RuffError(msg) from e
            rules: dict[str, NativeRule] = {}
            for entry in entries:
                if not entry.code or not self._is_selectable(entry):
                    continue
                rules[entry.code] = NativeRule(
                    description=entry.summary or "",
                    category=entry.linter or "",
                    recommended=is_recommended(entry.code),
                    url=entry.url or f"{RUFF_DOCS_URL}/{entry.name}/",
                )
            self._rules = rules
            logger.debug("Loaded %d selectable rules from %s", len(self._rules), self.ruff_bin)
        return self._rules

    def _command(self, paths: Sequence[str]) -> list[str]:
        selected = [code for code, level in self.levels.items() if level > 0]
        args = [
            "check",
            "--output-format",
            "json",
            "--no-fix",
            "--exit-zero",
            "--no-cache",
            f"--select={','.join(selected)}",
        ]
        if self.preview:
            args.append("--preview")
        if self.config_file:
            args.extend(["--config", self.config_file])
        args.append("--")
        args.extend(paths)
        return args

    def execute_on_files(self, paths: Sequence[str]) -> NativeReport:
        """Lint ``paths`` and group the diagnostics per file."""
        logger.debug("Running %s on %d file(s) in %s", self.ruff_bin, len(paths), self.cwd)
        output = self._run(self._command(paths))
        try:
            diagnostics = _DIAGNOSTIC_LIST.validate_json(output or "[]")
        except ValidationError as e:
            msg = f"Unexpected output from ruff check: {e.error_count()} validation errors"
            raise RuffError(msg) from e

        by_file: dict[str, list[NativeMessage]] = {}
        for diagnostic in diagnostics:
            by_file.setdefault(diagnostic.filename, []).append(self._to_message(diagnostic))

        base = self.cwd or os.getcwd()
        for path in paths:
            by_file.setdefault(os.path.abspath(os.path.join(base, path)), [])

        messages = [m for file_messages in by_file.values() for m in file_messages]
        return NativeReport(
            results=[
                NativeFileResult(file_path=name, messages=file_messages)
                for name, file_messages in by_file.items()
            ],
            error_count=sum(1 for m in messages if m.severity == 2),
            warning_count=sum(1 for m in messages if m.severity == 1),
            fixable_error_count=sum(1 for m in messages if m.severity == 2 and m.fix),
            fixable_warning_count=sum(1 for m in messages if m.severity == 1 and m.fix),
        )

    def _to_message(self, diagnostic: _RuffDiagnostic) -> NativeMessage:
        # No code means a syntax error; always fatal.
        fatal = diagnostic.code is None
        severity = 2
        if diagnostic.code is not None:
            severity = self.levels.get(diagnostic.code) or 2
        end = diagnostic.end_location
        return NativeMessage(
            rule_id=diagnostic.code,
            severity=severity,
            line=diagnostic.location.row,
            column=diagnostic.location.column,
            end_line=end.row if end else None,
            end_column=end.column if end else None,
            message=diagnostic.message,
            fatal=fatal,
            fix=NativeFix(**diagnostic.fix.model_dump()) if diagnostic.fix else None,
        )
