"""The fixed, ordered catalog of security checks.

Order here is the order checks run in and the tie-break order of the report.
"""
from __future__ import annotations

from ..core.engine import validate_catalog
from ..core.models import Rule
from .access import DM_POLICY, ELEVATED_ACCESS
from .audit import AUDIT_LOGGING
from .content import DANGEROUS_COMMAND_BLOCKING, PROMPT_INJECTION
from .credentials import CREDENTIALS_PLAINTEXT
from .gateway import GATEWAY_EXPOSED, PAIRING_CODES
from .isolation import NETWORK_ISOLATION, SANDBOX_DISABLED

CATALOG: tuple[Rule, ...] = (
    GATEWAY_EXPOSED,
    DM_POLICY,
    SANDBOX_DISABLED,
    CREDENTIALS_PLAINTEXT,
    PROMPT_INJECTION,
    DANGEROUS_COMMAND_BLOCKING,
    NETWORK_ISOLATION,
    ELEVATED_ACCESS,
    AUDIT_LOGGING,
    PAIRING_CODES,
)

_errors = validate_catalog(CATALOG)
if _errors:
    raise ValueError("invalid rule catalog:\n  " + "\n  ".join(_errors))

__all__ = ["CATALOG"]
