# SPDX-License-Identifier: MIT
"""Orchestrator-facing data model and the RuleEngine contract."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Rule:
    """A detectable issue exposed by one engine. Identity is (engine, name)."""

    engine: str
    sourcepackage: str
    name: str
    description: str
    categories: list[str]
    rulesets: list[str]
    languages: list[str]
    default_enabled: bool
    url: str | None = None


@dataclass
class RuleGroup:
    """A category of rules; paths collects the doc URLs of its rules."""

    engine: str
    name: str
    paths: list[str] = field(default_factory=list)


@dataclass
class Catalog:
    rules: list[Rule] = field(default_factory=list)
    categories: list[RuleGroup] = field(default_factory=list)
    rulesets: list[RuleGroup] = field(default_factory=list)


@dataclass
class RuleTarget:
    """A user-specified location and the concrete files resolved under it."""

    target: str
    paths: list[str] = field(default_factory=list)
    is_directory: bool = False


@dataclass(frozen=True)
class RuleViolation:
    """A single finding within one analyzed file."""

    line: int
    column: int
    rule_name: str
    severity: int
    message: str
    category: str
    url: str | None = None
    end_line: int | None = None
    end_column: int | None = None


@dataclass(frozen=True)
class RuleResult:
    """All violations found in one file by one engine."""

    engine: str
    file_name: str
    violations: list[RuleViolation]


@runtime_checkable
class RuleEngine(Protocol):
    """Contract every engine adapter offers to the orchestrator."""

    async def init(self) -> None: ...

    def get_name(self) -> str: ...

    def is_enabled(self) -> bool: ...

    async def get_target_patterns(self, target: str | None = None) -> list[str]: ...

    async def get_catalog(self) -> Catalog: ...

    async def run(
        self,
        rule_groups: Sequence[RuleGroup],
        rules: Sequence[Rule],
        targets: Sequence[RuleTarget],
    ) -> list[RuleResult]: ...

    def match_path(self, path: str) -> bool: ...
