"""
Application Settings
Load from environment variables
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Data source
    # ======================
    API_BASE_URL: str = "https://api.sensibull.com/v1"
    SNAPSHOTS_ENDPOINT: str = "positions_snapshots_list"
    PROFILE_PATH_PREFIX: str = "verified-pnl"
    HTTP_TIMEOUT_SECONDS: float = 30.0
    USER_AGENT: str = "verified-pnl-stats/0.1"

    # ======================
    # Logging
    # ======================
    LOG_LEVEL: str = "INFO"

    # ======================
    # Presentation
    # ======================
    CURRENCY_SYMBOL: str = "₹"

    # ======================
    # Timezone
    # ======================
    # Used for timestamps that arrive without an offset
    TIMEZONE: str = "Asia/Kolkata"

    # ======================
    # Pydantic v2 config
    # ======================
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
