"""Credential files left on disk next to the Clawdbot config.

This is the only check that touches the filesystem, and it only tests for
existence. File contents are never read.
"""
from __future__ import annotations

from pathlib import Path

from ..core.document import ConfigDocument
from ..core.models import Rule, Severity, SubFinding, Vulnerable


def clawdbot_home() -> Path:
    return Path.home() / ".clawdbot"


def _check_credentials(config: ConfigDocument) -> Vulnerable | None:
    oauth_path = clawdbot_home() / "oauth.json"
    env_path = clawdbot_home() / ".env"

    findings: list[SubFinding] = []

    if oauth_path.exists():
        findings.append(SubFinding(
            locator=str(oauth_path),
            issue="OAuth credentials may be stored in plaintext",
            recommendation="Use environment variables and chmod 600 permissions",
        ))

    if env_path.exists():
        findings.append(SubFinding(
            locator=str(env_path),
            issue="Environment file exists - verify permissions",
            recommendation="Ensure file has restrictive permissions (chmod 600)",
        ))

    return Vulnerable(finding=tuple(findings)) if findings else None


CREDENTIALS_PLAINTEXT = Rule(
    id="credentials-plaintext",
    name="Credentials Security",
    description="Check for plaintext credentials and file permissions",
    severity=Severity.CRITICAL,
    check=_check_credentials,
)
