# SPDX-License-Identifier: MIT
"""Strategy protocol — every variant-specific decision of a lint engine."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LintStrategy(Protocol):
    """Policy object supplying configuration and filtering to BaseLintEngine."""

    async def init(self) -> None:
        """One-time setup, awaited before any other method is used."""
        ...

    def get_name(self) -> str:
        """Engine identity used in the catalog, results and rule selection."""
        ...

    def is_enabled(self) -> bool: ...

    async def get_target_patterns(self, target: str | None = None) -> list[str]:
        """Glob patterns of the files this variant lints under ``target``."""
        ...

    def get_catalog_config(self) -> dict[str, Any]:
        """Runner configuration used only to enumerate the native registry."""
        ...

    async def get_run_config(self, target: str | None = None) -> dict[str, Any]:
        """Runner configuration merged into the run for ``target``."""
        ...

    def get_languages(self) -> list[str]: ...

    def is_rule_key_supported(self, key: str) -> bool:
        """Whether the native rule ``key`` belongs to this engine's catalog."""
        ...

    def filter_unsupported_paths(self, paths: list[str]) -> list[str]:
        """Drop resolved files this variant cannot analyze."""
        ...
