# Info_app/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # ───────────────────────────
    # ▶ server
    # ───────────────────────────
    http_host: str = "0.0.0.0"
    http_port: int = 8080

    # ───────────────────────────
    # ▶ subscribers
    # ───────────────────────────
    subscriber_queue_size: int = 100   # per-connection pending notifications

    # ───────────────────────────
    # ▶ client (info-cli)
    # ───────────────────────────
    server_url: str = "http://localhost:8080"

    # ───────────────────────────
    # ▶ logging
    # ───────────────────────────
    log_level: str = "info"

    # ───────────────────────────
    # ▶ meta
    # ───────────────────────────
    env: str = "development"            # dev / staging / prod …

    model_config = SettingsConfigDict(
        env_prefix="INFO_",             # INFO_HTTP_PORT, INFO_SERVER_URL, ...
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
