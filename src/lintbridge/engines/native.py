# SPDX-License-Identifier: MIT
"""Native shapes of the underlying linting engine and the runner protocol.

These mirror what a line-by-line linter hands back: a registry of rules keyed
by rule id, and a report of per-file messages. The adapter translates them
into the orchestrator's model in :mod:`lintbridge.types`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


class NativeRule(BaseModel):
    """Documentation metadata of one native rule."""

    description: str = ""
    category: str = ""
    recommended: bool = False
    url: str = ""


class NativeFix(BaseModel):
    message: str | None = None
    applicability: str | None = None


class NativeMessage(BaseModel):
    """One message emitted by the linter for one file."""

    rule_id: str | None
    severity: int
    line: int
    column: int
    message: str
    end_line: int | None = None
    end_column: int | None = None
    fatal: bool = False
    fix: NativeFix | None = None


class NativeFileResult(BaseModel):
    file_path: str
    messages: list[NativeMessage] = Field(default_factory=list)


class NativeReport(BaseModel):
    """Report of one execution. Only ``results`` is consumed by the adapter."""

    results: list[NativeFileResult] = Field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0
    fixable_error_count: int = 0
    fixable_warning_count: int = 0
    used_deprecated_rules: list[str] = Field(default_factory=list)


@runtime_checkable
class LintRunner(Protocol):
    """An underlying-engine instance built from one configuration object."""

    def get_rules(self) -> Mapping[str, NativeRule]: ...

    def execute_on_files(self, paths: Sequence[str]) -> NativeReport: ...
