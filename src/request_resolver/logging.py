"""Logging setup and redaction of resolved query strings and overrides."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional

from .models import RequestConfiguration

_SENSITIVE_KEYS = re.compile(r"(token|secret|api[_-]?key|password|authorization)", re.IGNORECASE)
_SENSITIVE_OVERRIDES = ("basic_authentication", "run_as")

REDACTED = "***REDACTED***"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # httpx logs every request URL at INFO, query string included
    logging.getLogger("httpx").setLevel(max(logging.WARNING, logging.getLogger().level))


def redact_payload(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: REDACTED if _SENSITIVE_KEYS.search(key) else _redact_value(value) for key, value in payload.items()}


def _redact_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return redact_payload(value)
    if isinstance(value, (list, tuple)):
        return [_redact_value(item) for item in value]
    return value


def redact_configuration(configuration: Optional[RequestConfiguration]) -> Optional[Dict[str, Any]]:
    """Override as a dict, with credentials and impersonation masked."""
    if configuration is None:
        return None
    data = redact_payload(configuration.to_dict())
    for key in _SENSITIVE_OVERRIDES:
        if key in data:
            data[key] = REDACTED
    return data
