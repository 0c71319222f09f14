"""Unit tests for application settings configuration."""

from pathlib import Path

from assetdash.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_remote_is_optional(monkeypatch):
    monkeypatch.delenv("REMOTE_API_BASE_URL", raising=False)

    assert Settings(remote_api_base_url="").remote_configured is False
    assert Settings(remote_api_base_url="  ").remote_configured is False
    assert Settings(remote_api_base_url="https://remote.test").remote_configured is True


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
    monkeypatch.setenv("WARRANTY_DAYS", "14")

    settings = Settings()

    assert settings.storage_backend == "sqlite"
    assert settings.warranty_days == 14
    assert settings.license_days == 60
