# SPDX-License-Identifier: MIT
"""Command-line entry point: dump catalogs or run the lint engines."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import Any

from lintbridge.config import load_settings
from lintbridge.engines.base import BaseLintEngine, EngineError
from lintbridge.engines.registry import load_engines
from lintbridge.targets import build_target
from lintbridge.types import Rule, RuleResult

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lintbridge", description="Drive ruff-backed lint engines"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--ruff-bin", default=None, help="ruff executable (overrides env)")
    parser.add_argument(
        "--preview",
        action="store_true",
        default=None,
        help="Include ruff preview rules (overrides env)",
    )
    parser.add_argument(
        "--engine",
        action="append",
        default=None,
        help="Restrict to this engine (repeatable)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("catalog", help="Print the rule catalog of each engine as JSON")

    run = sub.add_parser("run", help="Run rules against files or directories")
    run.add_argument("paths", nargs="+", help="Files or directories to lint")
    run.add_argument(
        "--rule",
        action="append",
        default=None,
        help="Rule name to run (repeatable); default: the default-enabled rules",
    )
    return parser


def _select_engines(engines: list[BaseLintEngine], names: list[str] | None) -> list[BaseLintEngine]:
    if not names:
        return engines
    return [e for e in engines if e.get_name() in names]


def _select_rules(rules: list[Rule], names: list[str] | None) -> list[Rule]:
    if names:
        return [r for r in rules if r.name in names]
    return [r for r in rules if r.default_enabled]


async def _catalog(engines: list[BaseLintEngine]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for engine in engines:
        out[engine.get_name()] = asdict(await engine.get_catalog())
    return out


async def _run(
    engines: list[BaseLintEngine], paths: list[str], rule_names: list[str] | None
) -> list[RuleResult]:
    results: list[RuleResult] = []
    for engine in engines:
        catalog = await engine.get_catalog()
        rules = _select_rules(catalog.rules, rule_names)
        targets = [build_target(p, await engine.get_target_patterns(p)) for p in paths]
        results.extend(await engine.run(catalog.categories, rules, targets))
    return results


async def _main(args: argparse.Namespace) -> int:
    settings = load_settings(ruff_bin=args.ruff_bin, preview=args.preview)
    engines = _select_engines(await load_engines(settings), args.engine)

    if args.command == "catalog":
        print(json.dumps(await _catalog(engines), indent=2))
        return EXIT_OK

    results = await _run(engines, args.paths, args.rule)
    print(json.dumps([asdict(r) for r in results], indent=2))
    return EXIT_VIOLATIONS if results else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_main(args))
    except EngineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR
