"""
Product Catalog Backend — Application Configuration
=====================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

The defaults are the values the service has always run with: port 8989,
`data.json` and `images/` relative to the working directory, and the
storefront's origin as the only allowed CORS origin. Every field can be
overridden from the environment (DATA_FILE, IMAGES_DIR, ...).
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Storage ───────────────────────────────────────────────────────────
    # What: Flat JSON file holding the whole product collection
    data_file: str = Field(
        default="./data.json",
        description="Path of the JSON array file holding all products",
    )

    # What: Directory product image filenames are resolved against
    images_dir: str = Field(
        default="./images",
        description="Directory holding product images",
    )

    # ── Public URLs ───────────────────────────────────────────────────────
    # What: Base address used to build coverImageUrl in the product listing
    public_base_url: str = Field(default="http://localhost:8989")

    @field_validator("public_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Cover URLs are built as f"{base}/images/..."; keep base slash-free."""
        return v.rstrip("/")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (see cors_origins_list)
    cors_origins: str = Field(default="https://leaf-and-lore.web.app")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8989, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported throughout the application
settings = Settings()
