from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "SEO Tag Inspector"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]

    # Fetcher
    http_timeout: float = 10.0
    user_agent: str = "Mozilla/5.0 (compatible; SEO-Tag-Inspector/1.0)"


settings = Settings()
