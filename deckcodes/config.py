from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKCODES_")

    app_name: str = "deckcodes"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP request limits; the codec itself has none
    max_code_length: int = 1024
    max_deck_entries: int = 500


settings = Settings()
