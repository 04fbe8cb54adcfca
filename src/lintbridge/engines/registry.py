# SPDX-License-Identifier: MIT
"""Engine class registry — explicit list of all lint engines."""

from __future__ import annotations

from lintbridge.config import EngineSettings, load_settings
from lintbridge.engines.base import BaseLintEngine
from lintbridge.engines.ruff_engines import PythonRuffEngine, RuffEngine, SecurityRuffEngine

ENGINE_REGISTRY: list[type[RuffEngine]] = [
    PythonRuffEngine,
    SecurityRuffEngine,
]


async def load_engines(
    settings: EngineSettings | None = None,
    *,
    enabled_only: bool = True,
) -> list[BaseLintEngine]:
    """Instantiate and initialize every registered engine."""
    resolved = settings or load_settings()
    engines: list[BaseLintEngine] = []
    for cls in ENGINE_REGISTRY:
        engine = cls(resolved)
        await engine.init()
        if enabled_only and not engine.is_enabled():
            continue
        engines.append(engine)
    return engines
