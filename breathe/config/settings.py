from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    config_file: str = Field(default="", validation_alias="BREATHE_CONFIG")
    default_pattern: str = Field(default="relax", validation_alias="BREATHE_PATTERN")
    tick_seconds: float = Field(default=1.0, gt=0, validation_alias="BREATHE_TICK_SECONDS")
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the log level and reject names loguru does not know."""
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL '{value}', expected one of {', '.join(VALID_LOG_LEVELS)}")
        return level


settings = Settings()
