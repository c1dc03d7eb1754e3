from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from .document import ConfigDocument


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    INFO = "info"


@dataclass(frozen=True)
class SubFinding:
    """One of several independent issues reported by a single rule."""
    locator: str
    issue: str
    recommendation: str

    def to_dict(self) -> dict[str, str]:
        return {"locator": self.locator, "issue": self.issue, "recommendation": self.recommendation}


FindingDetail = Union[str, tuple[SubFinding, ...]]


@dataclass(frozen=True)
class Vulnerable:
    """Outcome of a check that detected a problem. A passing check returns None."""
    finding: FindingDetail
    recommendation: str | None = None


@dataclass(frozen=True)
class Rule:
    id: str
    name: str
    description: str
    severity: Severity
    check: Callable[[ConfigDocument], Vulnerable | None] = field(repr=False, compare=False)

    def evaluate(self, document: ConfigDocument) -> Vulnerable | None:
        return self.check(document)


@dataclass(frozen=True)
class RuleEvaluation:
    """Result of running one rule: passed, vulnerable, or errored."""
    rule: Rule
    outcome: Vulnerable | None = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is None and self.error is None


@dataclass(frozen=True)
class Finding:
    id: str
    name: str
    severity: Severity
    description: str
    finding: FindingDetail | None = None
    recommendation: str | None = None
    error: str | None = None

    @classmethod
    def from_evaluation(cls, evaluation: RuleEvaluation) -> Finding:
        rule = evaluation.rule
        if evaluation.error is not None:
            return cls(
                id=rule.id,
                name=rule.name,
                severity=Severity.INFO,
                description=rule.description,
                error=evaluation.error,
            )
        if evaluation.outcome is None:
            raise ValueError(f"rule {rule.id!r} passed; no finding to build")
        return cls(
            id=rule.id,
            name=rule.name,
            severity=rule.severity,
            description=rule.description,
            finding=evaluation.outcome.finding,
            recommendation=evaluation.outcome.recommendation,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "severity": self.severity.value,
            "description": self.description,
        }
        if self.error is not None:
            data["error"] = self.error
            return data
        if isinstance(self.finding, tuple):
            data["finding"] = [item.to_dict() for item in self.finding]
        else:
            data["finding"] = self.finding
        data["recommendation"] = self.recommendation
        return data


@dataclass(frozen=True)
class Summary:
    passed: int = 0
    warnings: int = 0
    critical: int = 0


@dataclass(frozen=True)
class AnalysisResult:
    timestamp: str
    summary: Summary
    findings: tuple[Finding, ...] = ()
