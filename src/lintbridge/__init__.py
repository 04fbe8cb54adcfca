"""lintbridge — strategy-driven adapters from line linters to a rule-engine contract."""

from lintbridge.config import EngineSettings, load_settings
from lintbridge.engines import (
    BaseLintEngine,
    EngineError,
    LintStrategy,
    PythonRuffEngine,
    SecurityRuffEngine,
    StaticDependencies,
    load_engines,
)
from lintbridge.targets import build_target
from lintbridge.types import (
    Catalog,
    Rule,
    RuleEngine,
    RuleGroup,
    RuleResult,
    RuleTarget,
    RuleViolation,
)

__version__ = "0.1.0"

__all__ = [
    "BaseLintEngine",
    "Catalog",
    "EngineError",
    "EngineSettings",
    "LintStrategy",
    "PythonRuffEngine",
    "Rule",
    "RuleEngine",
    "RuleGroup",
    "RuleResult",
    "RuleTarget",
    "RuleViolation",
    "SecurityRuffEngine",
    "StaticDependencies",
    "build_target",
    "load_engines",
]
