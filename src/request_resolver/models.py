"""Value objects shared by requests and resolved paths."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"


@dataclass(frozen=True)
class RequestConfiguration:
    """Per call overrides of the connection wide settings.

    Only carried along with the resolved path; the transport decides what
    each value means.
    """

    request_timeout: Optional[float] = None
    ping_timeout: Optional[float] = None
    max_retries: Optional[int] = None
    disable_sniffing: Optional[bool] = None
    disable_ping: Optional[bool] = None
    allowed_status_codes: Tuple[int, ...] = ()
    basic_authentication: Optional[Tuple[str, str]] = None
    content_type: Optional[str] = None
    accept: Optional[str] = None
    opaque_id: Optional[str] = None
    run_as: Optional[str] = None
    force_node: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None or value == ():
                continue
            if item.name == "basic_authentication":
                value = {"username": value[0], "password": value[1]}
            elif isinstance(value, tuple):
                value = list(value)
            data[item.name] = value
        return data


class RequestConfigurationDescriptor:
    """Fluent builder for :class:`RequestConfiguration`."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def request_timeout(self, seconds: float) -> "RequestConfigurationDescriptor":
        self._values["request_timeout"] = seconds
        return self

    def ping_timeout(self, seconds: float) -> "RequestConfigurationDescriptor":
        self._values["ping_timeout"] = seconds
        return self

    def max_retries(self, retries: int) -> "RequestConfigurationDescriptor":
        self._values["max_retries"] = retries
        return self

    def disable_sniffing(self, disable: bool = True) -> "RequestConfigurationDescriptor":
        self._values["disable_sniffing"] = disable
        return self

    def disable_ping(self, disable: bool = True) -> "RequestConfigurationDescriptor":
        self._values["disable_ping"] = disable
        return self

    def allowed_status_codes(self, *codes: int) -> "RequestConfigurationDescriptor":
        self._values["allowed_status_codes"] = tuple(codes)
        return self

    def basic_authentication(self, username: str, password: str) -> "RequestConfigurationDescriptor":
        self._values["basic_authentication"] = (username, password)
        return self

    def content_type(self, mime_type: str) -> "RequestConfigurationDescriptor":
        self._values["content_type"] = mime_type
        return self

    def accept(self, mime_type: str) -> "RequestConfigurationDescriptor":
        self._values["accept"] = mime_type
        return self

    def opaque_id(self, opaque_id: str) -> "RequestConfigurationDescriptor":
        self._values["opaque_id"] = opaque_id
        return self

    def run_as(self, username: str) -> "RequestConfigurationDescriptor":
        self._values["run_as"] = username
        return self

    def force_node(self, node: str) -> "RequestConfigurationDescriptor":
        self._values["force_node"] = node
        return self

    def build(self) -> RequestConfiguration:
        return RequestConfiguration(**self._values)
