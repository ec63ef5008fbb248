from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDART_")

    bulk_data_url: str = "https://api.scryfall.com/bulk-data"
    dataset_type: str = "oracle_cards"

    # Scryfall rejects requests without a descriptive User-Agent
    user_agent: str = "cardart/0.1"

    data_dir: Path = Path("public/data")
    cache_dir: Path = Path(".cache")
    reports_dir: Path = Path("reports")

    max_attempts: int = 3
    retry_delay: float = 1.0  # seconds, multiplied by the attempt number

    progress_interval: int = 5000

    request_timeout: float = 30.0
    download_timeout: float = 300.0  # bulk file is well over 100MB uncompressed


settings = Settings()
