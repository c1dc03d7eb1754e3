"""Text and JSON rendering of an AnalysisResult."""
from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .core.models import AnalysisResult, Finding, Severity

SEVERITY_RANK = {Severity.CRITICAL: 0, Severity.HIGH: 1, Severity.MEDIUM: 2, Severity.INFO: 3}

_WIDTH = 60
_BAR = "|"

READ_ONLY_NOTICE = "This is a READ-ONLY analysis. No changes were made."
NO_ISSUES_MESSAGE = "No security issues found!"


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Order findings most severe first. Equal severities keep catalog order."""
    return sorted(findings, key=lambda f: SEVERITY_RANK.get(f.severity, len(SEVERITY_RANK)))


def format_report(result: AnalysisResult) -> str:
    lines: list[str] = []
    lines.append("=" * _WIDTH)
    lines.append("CLAWDBOT SECURITY ANALYSIS REPORT")
    lines.append("=" * _WIDTH)
    lines.append(f"Generated: {result.timestamp}")
    lines.append("")

    lines.append(_box_top("SUMMARY"))
    lines.append(f"{_BAR} Passed:     {result.summary.passed}")
    lines.append(f"{_BAR} Warnings:   {result.summary.warnings}")
    lines.append(f"{_BAR} Critical:   {result.summary.critical}")
    lines.append(_box_bottom())
    lines.append("")

    if not result.findings:
        lines.append(NO_ISSUES_MESSAGE)
    else:
        lines.append(_box_top("FINDINGS"))
        for finding in sort_findings(result.findings):
            lines.extend(_format_finding(finding))
            lines.append("")
        lines.append(_box_bottom())

    lines.append("")
    lines.append(READ_ONLY_NOTICE)
    return "\n".join(lines)


def _format_finding(f: Finding) -> list[str]:
    lines = [
        f"{_BAR} [{f.severity.value.upper()}] {f.name}",
        f"{_BAR}    {f.description}",
    ]
    if isinstance(f.finding, tuple):
        for item in f.finding:
            lines.append(f"{_BAR}    - {item.locator}: {item.recommendation}")
    elif f.finding:
        lines.append(f"{_BAR}    Finding: {f.finding}")
    if f.error is not None:
        lines.append(f"{_BAR}    Error: {f.error}")
    if f.recommendation:
        lines.append(f"{_BAR}    -> {f.recommendation}")
    return lines


def _box_top(title: str) -> str:
    head = f"+- {title} "
    return head + "-" * (_WIDTH - len(head))


def _box_bottom() -> str:
    return "+" + "-" * (_WIDTH - 1)


def result_to_dict(result: AnalysisResult) -> dict[str, Any]:
    """Structured dump with stable field names, findings in report order."""
    return {
        "timestamp": result.timestamp,
        "summary": {
            "passed": result.summary.passed,
            "warnings": result.summary.warnings,
            "critical": result.summary.critical,
        },
        "findings": [f.to_dict() for f in sort_findings(result.findings)],
    }


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result_to_dict(result), indent=2)
