"""Settings validation and search client options."""

import pytest
from pydantic import ValidationError

from street_archive.core.config import Settings
from street_archive.infrastructure.search.client import SearchClientFactory


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults_target_local_cluster() -> None:
    settings = _settings()
    assert settings.elasticsearch_url == "http://localhost:9200"
    assert settings.elasticsearch_index == "street-names"
    assert settings.cors_origins == ["http://localhost:5173"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"elasticsearch_url": "ftp://localhost:9200"},
        {"elasticsearch_url": "localhost:9200"},
        {"elasticsearch_index": "  "},
        {"elasticsearch_index": "Street-Names"},
        {"elasticsearch_username": "elastic"},
        {"elasticsearch_request_timeout": 0},
    ],
)
def test_invalid_backend_settings_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        _settings(**overrides)


def test_cors_origins_split_and_trimmed() -> None:
    settings = _settings(allowed_origins=" https://a.example , ,https://b.example")
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_client_options_plain_http_has_no_tls_or_auth() -> None:
    options = SearchClientFactory.client_options(_settings(elasticsearch_request_timeout=5))
    assert options == {"hosts": ["http://localhost:9200"], "request_timeout": 5}


def test_client_options_basic_auth_and_tls() -> None:
    options = SearchClientFactory.client_options(
        _settings(
            elasticsearch_url="https://es.internal:9200",
            elasticsearch_username="elastic",
            elasticsearch_password="secret",
            elasticsearch_ca_certs="/etc/ssl/es-ca.pem",
        )
    )
    assert options["basic_auth"] == ("elastic", "secret")
    assert options["verify_certs"] is True
    assert options["ca_certs"] == "/etc/ssl/es-ca.pem"
    assert "api_key" not in options


def test_client_options_api_key_wins_over_basic_auth() -> None:
    options = SearchClientFactory.client_options(
        _settings(
            elasticsearch_api_key="key-123",
            elasticsearch_username="elastic",
            elasticsearch_password="secret",
        )
    )
    assert options["api_key"] == "key-123"
    assert "basic_auth" not in options


async def test_create_search_client_does_not_connect() -> None:
    client = SearchClientFactory.create_search_client(_settings())
    try:
        assert client is not None
    finally:
        await client.close()
