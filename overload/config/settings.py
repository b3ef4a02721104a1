from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    sync_url: str = Field(default="", validation_alias="SYNC_URL")
    sync_data_file: str = Field(
        default="sync-data.json",
        validation_alias="SYNC_DATA_FILE",
        description="Path of the JSON snapshot persisted by the sync relay",
    )
    sync_host: str = Field(default="0.0.0.0", validation_alias="SYNC_HOST")  # noqa: S104
    sync_port: int = Field(default=8787, validation_alias="SYNC_PORT")
    sync_timeout_seconds: float = Field(
        default=10.0,
        validation_alias="SYNC_TIMEOUT_SECONDS",
        description="HTTP timeout used by the sync client for pull and push",
    )
    sync_max_payload_bytes: int = Field(
        default=2_000_000,
        validation_alias="SYNC_MAX_PAYLOAD_BYTES",
        description="Largest push body the relay accepts",
    )
    default_profile_id: str = Field(default="jacob", validation_alias="DEFAULT_PROFILE_ID")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(
        default="",
        validation_alias="LOG_FILE",
        description="Path of the rotating log file; empty logs to stderr only",
    )
    log_rotation: str = Field(default="10 MB", validation_alias="LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="LOG_RETENTION")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("sync_url")
    @classmethod
    def strip_sync_url(cls, value: str) -> str:
        """Trim whitespace and trailing slashes so endpoints can be appended."""
        return value.strip().rstrip("/")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
