from app.settings import get_settings


def test_defaults(monkeypatch):
    for name in (
        "PIX_DASHBOARD_API_URL",
        "PIX_DASHBOARD_TRANSACTIONS_PATH",
        "PIX_DASHBOARD_TIMEOUT",
        "PIX_DASHBOARD_TIMEZONE",
        "PIX_DASHBOARD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.api_base_url == "http://localhost:3000"
    assert settings.transactions_path == "/api/transactions"
    assert settings.request_timeout is None
    assert settings.display_timezone == "America/Sao_Paulo"
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PIX_DASHBOARD_API_URL", "https://pix.example.com")
    monkeypatch.setenv("PIX_DASHBOARD_TIMEOUT", "2.5")
    monkeypatch.setenv("PIX_DASHBOARD_TIMEZONE", "UTC")

    settings = get_settings()

    assert settings.api_base_url == "https://pix.example.com"
    assert settings.request_timeout == 2.5
    assert settings.display_timezone == "UTC"
