"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://blockchain.info"
DEFAULT_STATISTICS_URL = "https://api.blockchain.info"
DEFAULT_RECEIVE_URL = "https://api.blockchain.info/v2"
DEFAULT_USER_AGENT = "blockchain-api-python/1.0.0"


class ClientConfig(BaseSettings):
    """Configuration for the blockchain.info client."""

    model_config = SettingsConfigDict(
        env_prefix="BLOCKCHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_code: Optional[str] = Field(default=None, description="blockchain.info API code")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Explorer, ticker and pushtx host")
    statistics_url: str = Field(default=DEFAULT_STATISTICS_URL, description="Statistics host")
    receive_url: str = Field(default=DEFAULT_RECEIVE_URL, description="Receive payments host")
    service_url: Optional[str] = Field(default=None, description="Local wallet service URL")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header")

    # Logging Settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json|text)")
    log_file: Optional[str] = Field(default=None, description="Log file path")
    log_max_size_mb: int = Field(default=10, description="Max log file size in MB")
    log_backup_count: int = Field(default=5, description="Number of log backups")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v.lower()

    @field_validator("api_code", "service_url", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v
