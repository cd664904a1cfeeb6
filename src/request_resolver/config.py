"""Connection settings consumed while resolving requests."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False, frozen=True)

    service_name: str = Field(default="request-resolver")

    connection_base_url: str = Field(default="http://localhost:9200")
    connection_request_timeout_seconds: float = Field(default=60)
    connection_verify_ssl: bool = Field(default=True)
    connection_global_query_parameters: Dict[str, str] = Field(default_factory=dict)

    resolver_log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> ConnectionSettings:
    return ConnectionSettings()
