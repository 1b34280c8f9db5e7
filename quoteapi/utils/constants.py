from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class _Server(BaseSettings):
    """Server class to handle the server constant variables."""

    model_config = SettingsConfigDict(
        validate_default=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # leave unset to serve the dataset packaged with quoteapi
    DATASET_PATH: Path | None = None

    DEFAULT_LIMIT: int = 1
    MAX_LIMIT: int = 100

    # values in seconds, used for the Cache-Control header
    S_MAXAGE: int = 600
    STALE_WHILE_REVALIDATE: int = 86400


Server = _Server()
