"""Hand-off of a resolved path to httpx, without sending it."""

from __future__ import annotations

import base64
from typing import Any, Dict, Optional

import httpx

from .config import ConnectionSettings
from .path import RequestPath

OPAQUE_ID_HEADER = "X-Opaque-Id"
RUN_AS_HEADER = "es-security-runas-user"


def build_http_request(
    path: RequestPath,
    settings: ConnectionSettings,
    body: Optional[bytes] = None,
) -> httpx.Request:
    configuration = path.configuration
    headers: Dict[str, str] = {"Accept": "application/json"}
    timeout: Optional[float] = settings.connection_request_timeout_seconds

    if configuration is not None:
        if configuration.accept:
            headers["Accept"] = configuration.accept
        if configuration.content_type:
            headers["Content-Type"] = configuration.content_type
        if configuration.opaque_id:
            headers[OPAQUE_ID_HEADER] = configuration.opaque_id
        if configuration.run_as:
            headers[RUN_AS_HEADER] = configuration.run_as
        if configuration.basic_authentication:
            username, password = configuration.basic_authentication
            token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
            headers["Authorization"] = f"Basic {token}"
        if configuration.request_timeout is not None:
            timeout = configuration.request_timeout

    url = settings.connection_base_url.rstrip("/") + path.url_path
    extensions: Dict[str, Any] = {"timeout": httpx.Timeout(timeout).as_dict()}
    return httpx.Request(
        path.http_method.value,
        url,
        params=path.query_params(),
        headers=headers,
        content=body,
        extensions=extensions,
    )
