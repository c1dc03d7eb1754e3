"""Sandbox and container network isolation checks."""
from __future__ import annotations

from ..core.document import ConfigDocument, as_text
from ..core.models import Rule, Severity, Vulnerable

_DISABLED_SANDBOX_MODES = {"", "disabled", "false"}

# Docker networks that give the container a route to the host network
_SHARED_NETWORKS = {"", "bridge", "default"}


def _check_sandbox(config: ConfigDocument) -> Vulnerable | None:
    mode = config.lookup("sandbox")
    if as_text(mode) in _DISABLED_SANDBOX_MODES:
        return Vulnerable(
            finding=f'Sandbox is "{as_text(mode) or "unset"}" - disabled by default',
            recommendation="Enable sandbox=all and docker.network=none for isolation",
        )
    return None


def _check_network_isolation(config: ConfigDocument) -> Vulnerable | None:
    network = as_text(config.lookup("docker.network"))
    if network in _SHARED_NETWORKS:
        return Vulnerable(
            finding=f'Docker network is "{network or "default"}" - no isolation',
            recommendation="Set docker.network=none or use custom isolated network",
        )
    return None


SANDBOX_DISABLED = Rule(
    id="sandbox-disabled",
    name="Sandbox Configuration",
    description="Check if sandbox isolation is enabled",
    severity=Severity.HIGH,
    check=_check_sandbox,
)

NETWORK_ISOLATION = Rule(
    id="network-isolation",
    name="Network Isolation",
    description="Check if Docker network isolation is configured",
    severity=Severity.MEDIUM,
    check=_check_network_isolation,
)
