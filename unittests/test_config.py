import pytest

import config


def test_database_url_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(config.MissingConfigurationError):
        config.database_url()


def test_database_url_empty_is_missing(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")

    with pytest.raises(config.MissingConfigurationError):
        config.database_url()


def test_database_url_normalises_postgres_scheme(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://user:pw@db:5432/tabs")

    assert config.database_url() == "postgresql://user:pw@db:5432/tabs"


def test_database_url_passthrough(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://user:pw@db/tabs")

    assert config.database_url() == "postgresql+psycopg2://user:pw@db/tabs"


def test_defaults(monkeypatch):
    for key in [
        "DB_POOL_SIZE",
        "STARTUP_DELAY",
        "ORIGINS",
        "LIST_FAILURE_POLICY",
        "SAVE_FAILURE_POLICY",
    ]:
        monkeypatch.delenv(key, raising=False)

    assert config.pool_size() == 5
    assert config.startup_delay() == 2.0
    assert config.origins() == ["*"]
    assert config.list_failure_policy() == "empty"
    assert config.save_failure_policy() == "raise"


def test_origins_are_split(monkeypatch):
    monkeypatch.setenv("ORIGINS", "http://localhost:5173, http://example.com,")

    assert config.origins() == ["http://localhost:5173", "http://example.com"]


def test_policies_are_case_insensitive(monkeypatch):
    monkeypatch.setenv("LIST_FAILURE_POLICY", "ERROR")
    monkeypatch.setenv("SAVE_FAILURE_POLICY", " Error ")

    assert config.list_failure_policy() == "error"
    assert config.save_failure_policy() == "error"


@pytest.mark.parametrize(
    "key, accessor",
    [
        ("LIST_FAILURE_POLICY", config.list_failure_policy),
        ("SAVE_FAILURE_POLICY", config.save_failure_policy),
    ],
)
def test_unknown_policy(monkeypatch, key, accessor):
    monkeypatch.setenv(key, "retry")

    with pytest.raises(ValueError):
        accessor()
