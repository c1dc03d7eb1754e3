"""Who may talk to the assistant, and which tools it may reach."""
from __future__ import annotations

from ..core.document import ConfigDocument, as_flag, as_list, as_text
from ..core.models import Rule, Severity, Vulnerable

# Policies that let any user open a direct-message session
_OPEN_DM_POLICIES = {"", "allow", "all"}


def _check_dm_policy(config: ConfigDocument) -> Vulnerable | None:
    policy = as_text(config.lookup("dm_policy"))

    if policy in _OPEN_DM_POLICIES:
        return Vulnerable(
            finding=f'DM policy is "{policy or "unset"}" - allows all users',
            recommendation="Set dm_policy to allowlist with explicit users",
        )
    if policy == "allowlist" and not as_list(config.lookup("dm_policy_allowlist")):
        return Vulnerable(
            finding="DM policy is allowlist but no users are specified",
            recommendation="Add trusted users to dm_policy_allowlist",
        )
    return None


def _check_elevated_access(config: ConfigDocument) -> Vulnerable | None:
    tools = as_list(config.first("mcp_tools", "tool_access"))

    if tools and not as_flag(config.lookup("restrict_tools")):
        return Vulnerable(
            finding=f"{len(tools)} MCP tool(s) may have broad access - no restrictions configured",
            recommendation="Restrict MCP tools to minimum needed with restrict_tools=true",
        )
    return None


DM_POLICY = Rule(
    id="dm-policy",
    name="DM Policy Configuration",
    description="Check if DM policy is set to allowlist",
    severity=Severity.HIGH,
    check=_check_dm_policy,
)

ELEVATED_ACCESS = Rule(
    id="elevated-access",
    name="Elevated Tool Access",
    description="Check if tool access is properly restricted",
    severity=Severity.MEDIUM,
    check=_check_elevated_access,
)
