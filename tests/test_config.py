import os

import pytest

from rdw_proxy.config import Settings
from rdw_proxy.constants.datasets import FailurePolicy

ENV_KEYS = [
    "PORT",
    "RDW_APP_TOKEN",
    "RDW_BASE_URL",
    "RDW_TIMEOUT_S",
    "RDW_FAILURE_POLICY",
    "RDW_INCLUDE_BODY",
    "RDW_INCLUDE_RAW",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "SUPABASE_SERVICE_ROLE_KEY",
    "CORS_ORIGINS",
    "PUBLIC_DIR",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.port == 3001
    assert settings.rdw_app_token is None
    assert settings.rdw_base_url == "https://opendata.rdw.nl"
    assert settings.rdw_timeout_s == 10.0
    assert settings.failure_policy is FailurePolicy.PARTIAL_TOLERANT
    assert settings.include_body_datasets is True
    assert settings.include_raw is True
    assert settings.cors_origins == frozenset({"*"})


def test_from_env(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("RDW_APP_TOKEN", " token ")
    clean_env.setenv("RDW_BASE_URL", "http://localhost:9000/")
    clean_env.setenv("RDW_TIMEOUT_S", "2.5")
    clean_env.setenv("RDW_FAILURE_POLICY", "all-or-nothing")
    clean_env.setenv("RDW_INCLUDE_BODY", "no")
    clean_env.setenv("CORS_ORIGINS", "https://a.nl, https://b.nl,")
    clean_env.setenv("SUPABASE_SERVICE_ROLE_KEY", "service-role-secret")

    settings = Settings.from_env()

    assert settings.port == 8080
    assert settings.rdw_app_token == "token"
    assert settings.rdw_base_url == "http://localhost:9000"
    assert settings.rdw_timeout_s == 2.5
    assert settings.failure_policy is FailurePolicy.ALL_OR_NOTHING
    assert settings.include_body_datasets is False
    assert settings.cors_origins == frozenset({"https://a.nl", "https://b.nl"})
    assert "service-role-secret" not in repr(settings)


def test_bad_values_fall_back(clean_env):
    clean_env.setenv("PORT", "not-a-port")
    clean_env.setenv("RDW_TIMEOUT_S", "-1")
    clean_env.setenv("RDW_FAILURE_POLICY", "whatever")

    settings = Settings.from_env()

    assert settings.port == 3001
    assert settings.rdw_timeout_s == 10.0
    assert settings.failure_policy is FailurePolicy.PARTIAL_TOLERANT


def test_overrides_win(clean_env):
    clean_env.setenv("RDW_APP_TOKEN", "from-env")
    assert Settings.from_env(rdw_app_token="explicit").rdw_app_token == "explicit"


def test_dotenv_file_is_read(clean_env, tmp_path):
    (tmp_path / ".env").write_text("RDW_APP_TOKEN=from-dotenv\n")

    try:
        settings = Settings.from_env()
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("RDW_APP_TOKEN", None)

    assert settings.rdw_app_token == "from-dotenv"
