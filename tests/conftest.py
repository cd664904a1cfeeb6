import pytest

from request_resolver.config import ConnectionSettings


@pytest.fixture
def settings():
    """Connection settings isolated from the process environment."""
    return ConnectionSettings(
        connection_base_url="http://search.local:9200/",
        connection_request_timeout_seconds=30,
        connection_global_query_parameters={},
    )
