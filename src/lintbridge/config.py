# SPDX-License-Identifier: MIT
"""Engine settings for the lint adapters."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

KNOWN_ENGINES = frozenset({"ruff", "ruff-security"})


@dataclass(frozen=True)
class EngineSettings:
    """Host settings shared by every ruff-backed strategy."""

    ruff_bin: str = "ruff"
    disabled_engines: frozenset[str] = field(default_factory=frozenset)
    preview: bool = False


_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_engine_list(raw: str) -> frozenset[str]:
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def load_settings(
    ruff_bin: str | None = None,
    disabled_engines: Iterable[str] | None = None,
    preview: bool | None = None,
) -> EngineSettings:
    """Load settings with explicit argument > env > default priority.

    Args:
        ruff_bin: Path or name of the ruff executable (overrides LINTBRIDGE_RUFF_BIN).
        disabled_engines: Engine names to disable (overrides LINTBRIDGE_DISABLED_ENGINES).
        preview: Enable ruff preview rules (overrides LINTBRIDGE_PREVIEW).

    Returns:
        EngineSettings for the resolved values.

    Raises:
        ValueError: If a disabled engine name is not recognized.
    """
    resolved_bin = ruff_bin or os.environ.get("LINTBRIDGE_RUFF_BIN") or "ruff"
    if disabled_engines is None:
        disabled = _parse_engine_list(os.environ.get("LINTBRIDGE_DISABLED_ENGINES", ""))
    else:
        disabled = frozenset(disabled_engines)

    if preview is None:
        preview = os.environ.get("LINTBRIDGE_PREVIEW", "").strip().lower() in _TRUTHY

    unknown = disabled - KNOWN_ENGINES
    if unknown:
        msg = f"Unknown engine(s): {sorted(unknown)}. Valid engines: {sorted(KNOWN_ENGINES)}"
        raise ValueError(msg)
    return EngineSettings(ruff_bin=resolved_bin, disabled_engines=disabled, preview=preview)
