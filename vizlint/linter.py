"""
Validation Aggregator

Runs a rule set against one package and folds every rule's violations into a
single ``LintReport``. Rules run concurrently, but the report lists violations
in rule-set order so the output never depends on scheduling.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from vizlint.logging import log_error, log_event
from vizlint.metadata import load_metadata
from vizlint.rules import DEFAULT_RULES, Metadata, Rule, RuleOutcome

LINT_COMPLETE_MESSAGE = "Linting complete"


class LintReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = LINT_COMPLETE_MESSAGE
    errors: tuple[str, ...] = Field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors


def _rule_name(rule: Rule) -> str:
    return getattr(rule, "__name__", None) or type(rule).__name__


async def _settle(rule: Rule, metadata: Metadata, base_path: Path) -> RuleOutcome:
    """Awaits one rule and turns anything it raises into a failing outcome."""
    name = _rule_name(rule)
    try:
        outcome = await rule(metadata, base_path)
    except Exception as exc:
        log_error("rule_failed_unexpectedly", exc, rule=name)
        return RuleOutcome.failed([f"Rule {name} failed unexpectedly: {exc}"])
    if not isinstance(outcome, RuleOutcome):
        return RuleOutcome.failed([f"Rule {name} returned {type(outcome).__name__} instead of an outcome"])
    return outcome


async def lint(base_path: Path | str, rules: Optional[Sequence[Rule]] = None) -> LintReport:
    """
    Lints the package rooted at ``base_path``.

    ``rules`` replaces ``DEFAULT_RULES`` entirely when given. Metadata load
    errors propagate before any rule runs; rule violations never raise.
    """
    base_path = Path(base_path)
    metadata = await load_metadata(base_path)
    rule_set = DEFAULT_RULES if rules is None else tuple(rules)

    outcomes = await asyncio.gather(*(_settle(rule, metadata, base_path) for rule in rule_set))

    errors: list[str] = []
    for outcome in outcomes:
        if not outcome.ok:
            errors.extend(outcome.violations)

    report = LintReport(message=LINT_COMPLETE_MESSAGE, errors=tuple(errors))
    log_event("lint_complete", base_path=str(base_path), rule_count=len(rule_set), error_count=len(report.errors))
    return report
