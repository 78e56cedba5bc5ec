"""
Configuration management using Pydantic Settings
Loads and validates environment variables from .env file,
and holds the process-wide client toggles (TLD strictness, default logger)
"""

import logging
import threading
from typing import List, Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from enom_client.utils.logger import get_logger


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Environment-agnostic: supports both TEST and PRODUCTION endpoints
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # eNom API Configuration
    enom_username: str = Field(
        ...,
        description="eNom reseller account login (uid)"
    )
    enom_password: str = Field(
        ...,
        description="eNom reseller account password (pw)"
    )
    enom_env: Literal["TEST", "PRODUCTION"] = Field(
        default="TEST",
        description="eNom environment: TEST or PRODUCTION"
    )
    enom_url: Optional[str] = Field(
        default=None,
        description="Explicit interface URL, overrides enom_env"
    )

    # TLD validation
    enom_allow_any_tld: bool = Field(
        default=False,
        description="Skip TLD validation of outgoing options"
    )
    enom_allowed_tlds: List[str] = Field(
        default_factory=lambda: ["com", "net", "org"],
        description="Recognized TLDs, most specific first"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file name under logs/, '{date}' is expanded"
    )

    @property
    def enom_base_url(self) -> str:
        """
        Returns the appropriate eNom interface URL based on environment
        """
        if self.enom_url:
            return self.enom_url
        if self.enom_env == "TEST":
            return "https://resellertest.enom.com/interface.asp"
        return "https://reseller.enom.com/interface.asp"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("enom_username", "enom_password")
    @classmethod
    def validate_credentials(cls, v: str) -> str:
        """Reject empty and placeholder credentials"""
        if not v or v in ("your_username_here", "your_password_here"):
            raise ValueError(
                "eNom credentials must be set in the environment or .env file. "
                "Copy .env.example to .env and add your actual credentials."
            )
        return v

    @field_validator("enom_allowed_tlds")
    @classmethod
    def validate_allowed_tlds(cls, v: List[str]) -> List[str]:
        """Normalize TLDs ('.com ' -> 'com') and require at least one"""
        tlds = [t.strip().lstrip(".") for t in v if t.strip().lstrip(".")]
        if not tlds:
            raise ValueError("enom_allowed_tlds must contain at least one TLD")
        return tlds

    def is_production(self) -> bool:
        """Check if running against the production endpoint"""
        return self.enom_env == "PRODUCTION"


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.
    Loads configuration from the environment (and .env, if present) on first call.

    Returns:
        Settings instance

    Raises:
        ValidationError: If required environment variables are missing or invalid
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None


# Process-wide toggles shared by every Connection that does not override them
_lock = threading.Lock()
_allow_any_tld: bool = False
_default_logger: logging.Logger = get_logger("enom_client")


def get_allow_any_tld() -> bool:
    """Whether outgoing 'tld' options skip validation"""
    with _lock:
        return _allow_any_tld


def set_allow_any_tld(value: bool) -> None:
    """
    Enable or disable TLD validation process-wide.

    Note that Connection.domain_available refuses to run while any TLD
    is allowed, since it needs the recognized list to split domains.
    """
    global _allow_any_tld
    with _lock:
        _allow_any_tld = bool(value)


def get_default_logger() -> logging.Logger:
    """Logger used by connections created without one"""
    with _lock:
        return _default_logger


def set_default_logger(logger: Optional[logging.Logger]) -> None:
    """Replace the default logger; None restores the stdout logger"""
    global _default_logger
    with _lock:
        _default_logger = logger if logger is not None else get_logger("enom_client")
