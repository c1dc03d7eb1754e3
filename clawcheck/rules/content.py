"""Checks on what the assistant is allowed to read and execute."""
from __future__ import annotations

from ..core.document import ConfigDocument, as_flag, as_list
from ..core.models import Rule, Severity, Vulnerable

# Matched as substrings of blocked_commands entries, so "curl | sh" covers "curl |"
DANGEROUS_COMMANDS = (
    "rm -rf",
    "curl |",
    "git push --force",
    "mkfs",
    ":(){:|:&}",
)


def _check_prompt_injection(config: ConfigDocument) -> Vulnerable | None:
    keys = ("wrap_untrusted_content", "untrusted_content_wrapper")
    if not any(as_flag(config.lookup(k)) for k in keys):
        return Vulnerable(
            finding="No prompt injection protection configured for untrusted content",
            recommendation="Enable content wrapping for web/sandbox content via wrap_untrusted_content",
        )
    return None


def _check_dangerous_commands(config: ConfigDocument) -> Vulnerable | None:
    blocked = [str(b) for b in as_list(config.first("blocked_commands", "dangerous_commands"))]
    missing = [cmd for cmd in DANGEROUS_COMMANDS if not any(cmd in b for b in blocked)]

    if missing:
        return Vulnerable(
            finding=f"Missing command blocks: {', '.join(missing)}",
            recommendation="Add dangerous commands to blocked_commands list",
        )
    return None


PROMPT_INJECTION = Rule(
    id="prompt-injection",
    name="Prompt Injection Protection",
    description="Check if untrusted content wrapping is configured",
    severity=Severity.MEDIUM,
    check=_check_prompt_injection,
)

DANGEROUS_COMMAND_BLOCKING = Rule(
    id="dangerous-commands",
    name="Dangerous Command Blocking",
    description="Check if dangerous commands are blocked",
    severity=Severity.HIGH,
    check=_check_dangerous_commands,
)
