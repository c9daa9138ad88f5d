import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    transactions_path: str
    request_timeout: float | None
    display_timezone: str
    log_level: str


def _timeout_from_env(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    return float(raw)


def get_settings() -> Settings:
    return Settings(
        api_base_url=os.environ.get("PIX_DASHBOARD_API_URL", "http://localhost:3000"),
        transactions_path=os.environ.get(
            "PIX_DASHBOARD_TRANSACTIONS_PATH", "/api/transactions"
        ),
        request_timeout=_timeout_from_env(os.environ.get("PIX_DASHBOARD_TIMEOUT")),
        display_timezone=os.environ.get("PIX_DASHBOARD_TIMEZONE", "America/Sao_Paulo"),
        log_level=os.environ.get("PIX_DASHBOARD_LOG_LEVEL", "INFO"),
    )
