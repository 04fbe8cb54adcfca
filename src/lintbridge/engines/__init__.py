# SPDX-License-Identifier: MIT
"""Lint engine adapters — one strategy-driven RuleEngine over a line linter."""

from lintbridge.engines.base import BaseLintEngine, EngineError, EngineState, merge_run_config
from lintbridge.engines.dependencies import StaticDependencies
from lintbridge.engines.native import (
    LintRunner,
    NativeFileResult,
    NativeMessage,
    NativeReport,
    NativeRule,
)
from lintbridge.engines.registry import ENGINE_REGISTRY, load_engines
from lintbridge.engines.ruff_engines import PythonRuffEngine, RuffEngine, SecurityRuffEngine
from lintbridge.engines.ruff_runner import RuffError, RuffRunner
from lintbridge.engines.ruff_strategies import (
    PythonRuffStrategy,
    RuffStrategy,
    SecurityRuffStrategy,
)
from lintbridge.engines.strategy import LintStrategy

__all__ = [
    "ENGINE_REGISTRY",
    "BaseLintEngine",
    "EngineError",
    "EngineState",
    "LintRunner",
    "LintStrategy",
    "NativeFileResult",
    "NativeMessage",
    "NativeReport",
    "NativeRule",
    "PythonRuffEngine",
    "PythonRuffStrategy",
    "RuffEngine",
    "RuffError",
    "RuffRunner",
    "RuffStrategy",
    "SecurityRuffEngine",
    "SecurityRuffStrategy",
    "StaticDependencies",
    "load_engines",
    "merge_run_config",
]
