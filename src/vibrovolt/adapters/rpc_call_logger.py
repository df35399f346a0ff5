"""Logging of RPC calls when VIBROVOLT_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = frozenset({"password", "token", "authorization", "cookie"})
REDACTED = "***REDACTED***"


def should_log_calls() -> bool:
    """Check if call logging is enabled via the VIBROVOLT_LOG_REQUESTS environment variable."""
    return os.getenv("VIBROVOLT_LOG_REQUESTS", "").lower() == "true"


def redact(payload: Any) -> Any:
    """Return a copy of ``payload`` with sensitive values replaced, at any nesting depth."""
    if isinstance(payload, dict):
        return {
            k: REDACTED if str(k).lower() in SENSITIVE_KEYS else redact(v)
            for k, v in payload.items()
        }
    if isinstance(payload, list):
        return [redact(item) for item in payload]
    return payload


def _format_payload(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(payload)


def log_rpc_call(
    direction: str,
    procedure: str,
    payload: Any = None,
    status_code: int | None = None,
) -> None:
    """Log an RPC call or its response if VIBROVOLT_LOG_REQUESTS is enabled.

    Args:
        direction: "->" for outgoing/incoming calls, "<-" for responses.
        procedure: Dotted procedure name, e.g. "wallet.addFunds".
        payload: Input or output data; sensitive fields are redacted.
        status_code: HTTP status of a response (optional).
    """
    if not should_log_calls():
        return

    header = f"{direction} {procedure}"
    if status_code is not None:
        header += f" [{status_code}]"
    log_parts = [header]
    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(redact(payload))}")

    logger.info("RPC call:\n" + "\n".join(log_parts))
