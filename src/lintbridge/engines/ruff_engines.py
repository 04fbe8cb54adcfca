# SPDX-License-Identifier: MIT
"""Concrete ruff engines — each installs its strategy on init()."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintbridge.engines.base import BaseLintEngine
from lintbridge.engines.ruff_strategies import (
    PythonRuffStrategy,
    RuffStrategy,
    SecurityRuffStrategy,
)

if TYPE_CHECKING:
    from lintbridge.config import EngineSettings
    from lintbridge.engines.dependencies import StaticDependencies


class RuffEngine(BaseLintEngine):
    """A BaseLintEngine whose strategy is built from ``strategy_class``."""

    strategy_class: type[RuffStrategy] = PythonRuffStrategy

    def __init__(
        self,
        settings: EngineSettings | None = None,
        dependencies: StaticDependencies | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._static_dependencies = dependencies

    async def init(self) -> None:
        strategy = self.strategy_class(self._settings)
        await self.initialize_contents(strategy, self._static_dependencies)


class PythonRuffEngine(RuffEngine):
    strategy_class = PythonRuffStrategy


class SecurityRuffEngine(RuffEngine):
    strategy_class = SecurityRuffStrategy
