from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiConfig(BaseSettings):
    """Google Gemini configuration."""

    api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    default_model: str = Field(
        default="gemini-1.5-flash",
        validation_alias="GEMINI_DEFAULT_MODEL",
    )
    poll_interval_seconds: float = Field(
        default=2.0,
        validation_alias="GEMINI_POLL_INTERVAL_SECONDS",
        ge=0.0,
    )
    max_poll_attempts: int = Field(
        default=150,
        validation_alias="GEMINI_MAX_POLL_ATTEMPTS",
        ge=1,
    )
    delete_remote_files: bool = Field(
        default=False,
        validation_alias="GEMINI_DELETE_REMOTE_FILES",
        description="Delete the provider-side copy once generation finishes.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Audio Summary Backend"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"
    log_file: str = "logs/app.log"
    pipeline_log_file: str = "logs/summary_pipeline.log"
    transcript_log_file: str = "logs/transcripts.log"

    # Uploads are staged here only for the lifetime of one request
    upload_dir: str = "uploads"

    # Default summarization rules
    rules_file: str = "resources/rules.txt"
    default_rules: str = "Summarize the key takeaways."

    # Gemini
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
