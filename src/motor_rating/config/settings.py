"""Runtime settings for the API process (not rating inputs)."""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MOTOR_RATING_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["*"]

    api_title: str = "Motor Insurance Rating Engine API"
    api_version: str = "1.0"


def configure_logging(settings: EngineSettings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = EngineSettings()
