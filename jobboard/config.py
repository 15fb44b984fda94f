"""
Job Board Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

LOCAL_MONGODB_URI = "mongodb://localhost:27017"


class BoardSettings(BaseSettings):
    """
    Job board configuration with validation.

    All settings can be overridden via environment variables or a .env file.
    """

    # === Server ===
    port: int = Field(default=5000, ge=1, le=65535, description="HTTP listen port")
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # === CORS ===
    client_origin: str = Field(
        default="http://localhost:5173",
        description="Comma-separated list of allowed client origins"
    )

    # === MongoDB ===
    db_user: str = Field(default="", description="Atlas database user")
    db_pass: str = Field(default="", description="Atlas database password")
    db_host: str = Field(default="cluster0.mongodb.net", description="Atlas cluster host")
    mongodb_uri: Optional[str] = Field(
        default=None,
        description="Full MongoDB URI; overrides DB_USER/DB_PASS/DB_HOST when set"
    )
    mongo_db_name: str = Field(default="jobBoard", description="MongoDB database name")

    # === Logging ===
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")
    log_format: str = Field(default="simple", description="simple or json")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("mongodb_uri")
    @classmethod
    def validate_uri_format(cls, v: Optional[str]) -> Optional[str]:
        """Basic URI scheme validation."""
        if not v:
            return None
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(f"Invalid MongoDB URI format: {v}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in {"simple", "json"}:
            raise ValueError("log_format must be 'simple' or 'json'")
        return v_lower

    @property
    def has_credentials(self) -> bool:
        return bool(self.db_user and self.db_pass)

    @property
    def mongodb_connection_uri(self) -> str:
        """
        Resolve the connection string.

        Precedence: MONGODB_URI, then an Atlas SRV URI built from DB_USER and
        DB_PASS, then a local server.
        """
        if self.mongodb_uri:
            return self.mongodb_uri
        if self.has_credentials:
            return (
                f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
                f"@{self.db_host}/?retryWrites=true&w=majority"
            )
        return LOCAL_MONGODB_URI

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        if not self.client_origin:
            return []
        return [origin.strip() for origin in self.client_origin.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def redacted_uri(self) -> str:
        """Connection string safe for log output."""
        uri = self.mongodb_connection_uri
        if "@" not in uri:
            return uri
        scheme, rest = uri.split("://", 1)
        return f"{scheme}://*****@{rest.split('@', 1)[1]}"

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for production.

        Returns list of warning/error messages.
        """
        issues = []

        if self.is_production:
            if not self.mongodb_uri and not self.has_credentials:
                issues.append("CRITICAL: MONGODB_URI or DB_USER/DB_PASS required in production")
            if "localhost" in self.mongodb_connection_uri:
                issues.append("WARNING: Using localhost MongoDB in production")
            if not self.cors_origins_list:
                issues.append("WARNING: CLIENT_ORIGIN not configured")

        return issues

    class Config:
        env_file = ".env"
        env_prefix = ""
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> BoardSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the life of the process.
    """
    return BoardSettings()


def validate_config_on_startup() -> BoardSettings:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    Logs warnings for non-critical issues.
    """
    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    for issue in settings.validate_production_config():
        if issue.startswith("CRITICAL"):
            raise ValueError(issue)
        logger.warning(issue)

    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  port={settings.port}")
    logger.info(f"  mongodb_uri={settings.redacted_uri()}")
    logger.info(f"  database={settings.mongo_db_name}")
    logger.info(f"  cors_origins={settings.cors_origins_list}")

    return settings
