from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from .document import ConfigDocument
from .models import AnalysisResult, Finding, Rule, RuleEvaluation, Severity, Summary

logger = logging.getLogger(__name__)

_WARNING_SEVERITIES = {Severity.HIGH, Severity.MEDIUM}


def evaluate_rule(rule: Rule, document: ConfigDocument) -> RuleEvaluation:
    """Run a single rule. A failing check becomes an error evaluation, never an exception."""
    try:
        outcome = rule.evaluate(document)
    except Exception as e:
        message = str(e) or type(e).__name__
        logger.warning("check '%s' failed: %s", rule.id, message)
        return RuleEvaluation(rule=rule, error=message)

    logger.debug("check '%s': %s", rule.id, "vulnerable" if outcome is not None else "passed")
    return RuleEvaluation(rule=rule, outcome=outcome)


def run_analysis(document: ConfigDocument, rules: Sequence[Rule]) -> AnalysisResult:
    """Evaluate every rule in catalog order and aggregate the results."""
    timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    evaluations = [evaluate_rule(rule, document) for rule in rules]
    summary, findings = _aggregate(evaluations)
    return AnalysisResult(timestamp=timestamp, summary=summary, findings=tuple(findings))


def _aggregate(evaluations: Iterable[RuleEvaluation]) -> tuple[Summary, list[Finding]]:
    """Fold evaluations into summary counters and findings.

    Errored rules produce a finding but bump no counter.
    """
    passed = warnings = critical = 0
    findings: list[Finding] = []

    for ev in evaluations:
        if ev.passed:
            passed += 1
            continue
        if ev.error is None:
            if ev.rule.severity == Severity.CRITICAL:
                critical += 1
            elif ev.rule.severity in _WARNING_SEVERITIES:
                warnings += 1
        findings.append(Finding.from_evaluation(ev))

    return Summary(passed=passed, warnings=warnings, critical=critical), findings


def validate_catalog(rules: Iterable[Rule]) -> list[str]:
    """Return a list of error strings if the catalog is malformed."""
    errors: list[str] = []
    seen: set[str] = set()
    for i, rule in enumerate(rules):
        if not rule.id:
            errors.append(f"rules[{i}]: missing id")
        elif rule.id in seen:
            errors.append(f"rules[{i}]: duplicate id '{rule.id}'")
        seen.add(rule.id)
        if not isinstance(rule.severity, Severity):
            errors.append(f"rules[{i}] (id={rule.id}): unknown severity {rule.severity!r}")
    return errors
