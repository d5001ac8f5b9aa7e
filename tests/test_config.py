import pytest

from config import DEFAULT_BREVO_API_URL, Config


def test_from_env_defaults(monkeypatch):
    for key in ("PORT", "HOST", "SENDER_EMAIL", "SENDER_NAME", "RECEIVER_EMAIL",
                "BREVO_API_KEY", "BREVO_API_URL", "DELIVERY_TIMEOUT_SECONDS",
                "UPLOAD_DIR", "PUBLIC_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    config = Config.from_env(load_dotenv_file=False)

    assert config.port == 10000
    assert config.host == "0.0.0.0"
    assert config.sender_name == "Hanuman Finance"
    assert config.brevo_api_url == DEFAULT_BREVO_API_URL
    assert config.delivery_timeout_seconds == 30.0
    assert config.upload_dir == "uploads"
    assert config.log_level == "INFO"


def test_from_env_reads_values(monkeypatch):
    monkeypatch.setenv("PORT", "3000")
    monkeypatch.setenv("SENDER_EMAIL", "loans@example.com")
    monkeypatch.setenv("RECEIVER_EMAIL", "team@example.com")
    monkeypatch.setenv("BREVO_API_KEY", "xkeysib-secret")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env(load_dotenv_file=False)

    assert config.port == 3000
    assert config.sender_email == "loans@example.com"
    assert config.receiver_email == "team@example.com"
    assert config.brevo_api_key == "xkeysib-secret"
    assert config.log_level == "DEBUG"


def test_from_env_rejects_bad_port(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(ValueError):
        Config.from_env(load_dotenv_file=False)
