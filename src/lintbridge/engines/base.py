# SPDX-License-Identifier: MIT
"""BaseLintEngine — one RuleEngine implementation for every linter variant.

All variant-specific decisions are delegated to a LintStrategy; host access
(runner construction, path resolution, cwd) goes through StaticDependencies.
The adapter owns catalog construction, rule selection, per-target run
composition and result normalization.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from lintbridge.engines.dependencies import StaticDependencies
from lintbridge.engines.native import NativeMessage, NativeReport, NativeRule
from lintbridge.engines.strategy import LintStrategy
from lintbridge.types import Catalog, Rule, RuleGroup, RuleResult, RuleTarget, RuleViolation

logger = logging.getLogger(__name__)

# Every selected rule is escalated to the runner's maximum level.
SELECTED_RULE_LEVEL = "error"


class EngineState(StrEnum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class EngineError(Exception):
    """Raised when an engine run fails; aborts the whole run() call."""

    def __init__(self, engine: str, message: str) -> None:
        self.engine = engine
        self.message = message
        super().__init__(f"Engine {engine!r} failed: {message}")


def merge_run_config(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay a strategy run config on the adapter's base config.

    Strategy keys win, except that the selected rule levels in ``base["rules"]``
    are always kept: a strategy ``rules`` map is combined underneath them.
    """
    merged = {**base, **overrides}
    strategy_rules = overrides.get("rules")
    if strategy_rules is not None:
        merged["rules"] = {**strategy_rules, **base.get("rules", {})}
    return merged


class BaseLintEngine(ABC):
    """RuleEngine adapter over a line-by-line linter, parameterized by strategy."""

    def __init__(self) -> None:
        self._state = EngineState.UNINITIALIZED
        self._init_task: asyncio.Task[None] | None = None
        self._strategy: LintStrategy | None = None
        self._dependencies: StaticDependencies | None = None
        self._log = logger

    @property
    def state(self) -> EngineState:
        return self._state

    @abstractmethod
    async def init(self) -> None:
        """Build the variant's strategy and hand it to initialize_contents()."""

    async def initialize_contents(
        self,
        strategy: LintStrategy,
        dependencies: StaticDependencies | None = None,
    ) -> None:
        """Initialize once. Concurrent callers share the in-flight initialization."""
        if self._state is EngineState.READY:
            return
        if self._state is EngineState.INITIALIZING and self._init_task is not None:
            await self._init_task
            return

        self._state = EngineState.INITIALIZING
        self._init_task = asyncio.ensure_future(
            self._initialize(strategy, dependencies or StaticDependencies())
        )
        try:
            await self._init_task
        except BaseException:
            self._state = EngineState.UNINITIALIZED
            self._init_task = None
            raise

    async def _initialize(self, strategy: LintStrategy, dependencies: StaticDependencies) -> None:
        await strategy.init()
        self._strategy = strategy
        self._dependencies = dependencies
        self._log = logger.getChild(strategy.get_name())
        self._state = EngineState.READY

    def _require_ready(self) -> tuple[LintStrategy, StaticDependencies]:
        if (
            self._state is not EngineState.READY
            or self._strategy is None
            or self._dependencies is None
        ):
            msg = f"{type(self).__name__} used before init() completed"
            raise RuntimeError(msg)
        return self._strategy, self._dependencies

    # --- Delegation ---

    def match_path(self, path: str) -> bool:
        self._log.debug("Custom rules are not supported for lint engines: %s", path)
        return False

    def get_name(self) -> str:
        strategy, _ = self._require_ready()
        return strategy.get_name()

    def is_enabled(self) -> bool:
        strategy, _ = self._require_ready()
        return strategy.is_enabled()

    async def get_target_patterns(self, target: str | None = None) -> list[str]:
        strategy, _ = self._require_ready()
        return await strategy.get_target_patterns(target)

    # --- Catalog ---

    async def get_catalog(self) -> Catalog:
        """Build the catalog from the native registry, filtered by the strategy."""
        strategy, dependencies = self._require_ready()
        runner = dependencies.create_runner(strategy.get_catalog_config())

        category_map: dict[str, RuleGroup] = {}
        rules: list[Rule] = []
        for key, docs in runner.get_rules().items():
            rule = self._process_rule(key, docs)
            if rule is None:
                continue
            rules.append(rule)
            category = category_map.get(docs.category)
            if category is None:
                category = RuleGroup(engine=self.get_name(), name=docs.category)
                category_map[docs.category] = category
            category.paths.append(docs.url)

        return Catalog(rules=rules, categories=list(category_map.values()), rulesets=[])

    def _process_rule(self, key: str, docs: NativeRule) -> Rule | None:
        strategy, _ = self._require_ready()
        if not strategy.is_rule_key_supported(key):
            return None
        name = self.get_name()
        return Rule(
            engine=name,
            sourcepackage=name,
            name=key,
            description=docs.description,
            categories=[docs.category],
            rulesets=[docs.category],
            languages=list(strategy.get_languages()),
            default_enabled=docs.recommended,
            url=docs.url,
        )

    # --- Run ---

    async def run(
        self,
        rule_groups: Sequence[RuleGroup],
        rules: Sequence[Rule],
        targets: Sequence[RuleTarget],
    ) -> list[RuleResult]:
        """Run the selected rules of this engine against each target in turn.

        Raises:
            EngineError: If configuring or invoking the linter fails for any target.
        """
        self._require_ready()
        if not targets:
            self._log.debug("No matching target files found. Nothing to execute.")
            return []

        selected = self._select_relevant_rules(rules)
        if not selected:
            self._log.debug("No matching rules to run. Nothing to execute.")
            return []

        results: list[RuleResult] = []
        try:
            for target in targets:
                results.extend(await self._run_target(target, selected))
        except EngineError:
            raise
        except Exception as e:
            raise EngineError(self.get_name(), str(e) or type(e).__name__) from e
        return results

    def _select_relevant_rules(self, rules: Sequence[Rule]) -> dict[str, str]:
        name = self.get_name()
        selected = {rule.name: SELECTED_RULE_LEVEL for rule in rules if rule.engine == name}
        self._log.debug("Count of rules selected for %s: %d", name, len(selected))
        return selected

    async def _run_target(self, target: RuleTarget, selected: dict[str, str]) -> list[RuleResult]:
        strategy, dependencies = self._require_ready()
        if target.is_directory:
            cwd = dependencies.resolve_target_path(target.target)
        else:
            cwd = dependencies.get_current_working_directory()
        self._log.debug("Using current working directory in config as %s", cwd)
        config: dict[str, Any] = {"cwd": cwd, "rules": dict(selected)}

        paths = strategy.filter_unsupported_paths(list(target.paths))
        if not paths:
            self._log.debug("No target files to analyze from %s", target.target)
            return []

        config = merge_run_config(config, await strategy.get_run_config(target.target))

        self._log.debug("About to run %s. targets: %d", self.get_name(), len(paths))
        runner = dependencies.create_runner(config)
        report = runner.execute_on_files(paths)
        self._log.debug("Finished running %s", self.get_name())

        return self._results_from_report(report, runner.get_rules())

    def _results_from_report(
        self, report: NativeReport, rule_map: Mapping[str, NativeRule]
    ) -> list[RuleResult]:
        # Files without messages are not reported.
        return [
            self._to_rule_result(entry.file_path, entry.messages, rule_map)
            for entry in report.results
            if entry.messages
        ]

    def _to_rule_result(
        self,
        file_name: str,
        messages: list[NativeMessage],
        rule_map: Mapping[str, NativeRule],
    ) -> RuleResult:
        return RuleResult(
            engine=self.get_name(),
            file_name=file_name,
            violations=[self._to_violation(m, rule_map) for m in messages],
        )

    @staticmethod
    def _to_violation(message: NativeMessage, rule_map: Mapping[str, NativeRule]) -> RuleViolation:
        docs = rule_map.get(message.rule_id) if message.rule_id is not None else None
        return RuleViolation(
            line=message.line,
            column=message.column,
            end_line=message.end_line,
            end_column=message.end_column,
            rule_name=message.rule_id or "",
            severity=message.severity,
            message=message.message,
            category=docs.category if docs else "",
            url=docs.url if docs else "",
        )
