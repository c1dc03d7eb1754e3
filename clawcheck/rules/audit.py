from __future__ import annotations

from ..core.document import ConfigDocument, as_text
from ..core.models import Rule, Severity, Vulnerable

_DISABLED_VALUES = {"", "false", "disabled"}


def _check_audit_logging(config: ConfigDocument) -> Vulnerable | None:
    setting = config.first("audit_logging", "session_logging", "audit")
    if as_text(setting) in _DISABLED_VALUES:
        return Vulnerable(
            finding="Audit logging is disabled",
            recommendation="Enable comprehensive session logging for security monitoring",
        )
    return None


AUDIT_LOGGING = Rule(
    id="audit-logging",
    name="Audit Logging",
    description="Check if comprehensive session logging is enabled",
    severity=Severity.MEDIUM,
    check=_check_audit_logging,
)
