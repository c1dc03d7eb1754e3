"""Gateway exposure and device pairing checks."""
from __future__ import annotations

import os

from ..core.document import ConfigDocument, as_int, as_text
from ..core.models import Rule, Severity, Vulnerable

AUTH_TOKEN_ENV = "CLAWDBOT_AUTH_TOKEN"

_DEFAULT_BIND = "127.0.0.1"
_DEFAULT_PORT = 18789
_PUBLIC_BIND = "0.0.0.0"

# Shortest pairing code considered resistant to guessing
_MIN_PAIRING_CODE_LENGTH = 8


def _check_gateway_exposed(config: ConfigDocument) -> Vulnerable | None:
    # Flat rc files put gateway keys at the top level
    bind = as_text(config.first("gateway.bind_address", "bind_address", default=_DEFAULT_BIND))
    token = config.first("gateway.auth_token", "auth_token") or os.environ.get(AUTH_TOKEN_ENV)

    if bind == _PUBLIC_BIND and not token:
        port = config.first("gateway.port", "port", default=_DEFAULT_PORT)
        return Vulnerable(
            finding=f"Gateway exposed on {_PUBLIC_BIND}:{port} without authentication",
            recommendation=f"Set gateway.auth_token or the {AUTH_TOKEN_ENV} environment variable",
        )
    return None


def _check_pairing_codes(config: ConfigDocument) -> Vulnerable | None:
    code_length = as_int(config.lookup("pairing.code_length"))
    if code_length and code_length < _MIN_PAIRING_CODE_LENGTH:
        return Vulnerable(
            finding=f"Pairing code length ({code_length}) is too short",
            recommendation=(
                f"Use cryptographic random codes with minimum {_MIN_PAIRING_CODE_LENGTH} "
                "characters + rate limiting"
            ),
        )

    if not config.first("pairing.rate_limit", "pairing.max_attempts"):
        return Vulnerable(
            finding="No rate limiting on pairing codes",
            recommendation="Enable pairing.rate_limit or pairing.max_attempts to prevent brute force attacks",
        )
    return None


GATEWAY_EXPOSED = Rule(
    id="gateway-exposed",
    name="Gateway Exposure",
    description="Check if gateway is exposed on 0.0.0.0 without auth token",
    severity=Severity.CRITICAL,
    check=_check_gateway_exposed,
)

PAIRING_CODES = Rule(
    id="pairing-codes",
    name="Pairing Code Security",
    description="Check if pairing codes are long enough and rate limited",
    severity=Severity.MEDIUM,
    check=_check_pairing_codes,
)
