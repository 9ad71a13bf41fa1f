import pydantic
import pytest

from elastic_email.core import config
from elastic_email.core.config import DEFAULT_BASE_URL, ClientSettings, get_user_env_file, write_user_env_vars


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("ELASTIC_EMAIL_API_KEY", "from-env")
    monkeypatch.setenv("ELASTIC_EMAIL_HTTP_TIMEOUT_SECONDS", "5")

    settings = ClientSettings()

    assert settings.api_key == "from-env"
    assert settings.http_timeout_seconds == 5.0


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("ELASTIC_EMAIL_BASE_URL", raising=False)

    settings = ClientSettings(_env_file=None)

    assert settings.base_url == DEFAULT_BASE_URL


def test_settings_validate_timeout():
    with pytest.raises(pydantic.ValidationError):
        ClientSettings(http_timeout_seconds=0)


def test_write_user_env_vars_merges_existing_values(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# old\nELASTIC_EMAIL_BASE_URL='https://old'\nKEEP=1\n", encoding="utf-8")

    written = write_user_env_vars(
        {"ELASTIC_EMAIL_API_KEY": "abc", "ELASTIC_EMAIL_BASE_URL": "https://new", "SKIPPED": None},
        env_path=env_path,
    )

    assert written == env_path
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == [
        "ELASTIC_EMAIL_API_KEY=abc",
        "ELASTIC_EMAIL_BASE_URL=https://new",
        "KEEP=1",
    ]


def test_user_env_file_follows_xdg_config_home(monkeypatch, tmp_path):
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_env_file() == tmp_path / "elastic-email" / ".env"
