from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Cache policy
    cache_time_ms: int = 86_400_000

    # Portal session detection
    session_cookie_names: list[str] = ["PacerUser", "PacerSession"]

    # Archive uploader
    upload_url: str = "http://localhost:8080/recap/upload/"
    http_timeout: float = 30.0
    http_max_retries: int = 3
    http_verify_ssl: bool = True  # set False behind corporate SSL-inspection proxies

    # Logging
    log_level: str = "INFO"
    log_headers: bool = False


settings = Settings()
