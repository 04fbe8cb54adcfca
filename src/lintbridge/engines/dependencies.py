# SPDX-License-Identifier: MIT
"""Host-environment seam for BaseLintEngine — swapped out in tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lintbridge.engines.native import LintRunner


class StaticDependencies:
    """Impure operations the adapter needs: runner construction, paths, cwd."""

    def create_runner(self, config: dict[str, Any]) -> LintRunner:
        from lintbridge.engines.ruff_runner import RuffRunner

        return RuffRunner(config)

    def resolve_target_path(self, target: str) -> str:
        return os.path.abspath(target)

    def get_current_working_directory(self) -> str:
        return os.getcwd()
