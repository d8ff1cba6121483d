"""Unit tests for application settings configuration."""

from pathlib import Path

from creziapro.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_admin_session_ttl_is_derived_from_hours():
    settings = Settings(_env_file=None, admin_session_ttl_hours=2)

    assert settings.admin_session_ttl_seconds == 7200


def test_settings_read_environment(monkeypatch):
    """Environment variables override the built-in defaults."""
    monkeypatch.setenv("CHAT_AGENT_URL", "http://agent.local/agents/chat")
    monkeypatch.setenv("ADMIN_EMAIL", "ops@example.com")

    settings = Settings(_env_file=None)

    assert settings.chat_agent_url == "http://agent.local/agents/chat"
    assert settings.admin_email == "ops@example.com"
    assert settings.admin_cookie_name == "creziapro_admin_session"
