"""
Tikun13 Configuration Module
============================

Centralized configuration management using Pydantic Settings.

Loads configuration from:
    1. Environment variables
    2. .env file (if present)
    3. Default values

Usage:
    from tikun13.config import settings

    print(settings.ocsf_version)
    print(settings.product_name)

Author: Tikun13 Team
Version: 1.0.0
"""

from functools import lru_cache
from typing import Dict, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Naming convention: UPPER_SNAKE_CASE in env, lower_snake_case in code.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    # =========================================================================
    # OCSF Output
    # =========================================================================

    ocsf_version: str = Field(default="1.6.0", description="OCSF schema version")
    extension_version: str = Field(
        default="2025",
        description="Version tag of the Amendment 13 OCSF extension"
    )

    product_name: str = Field(
        default="Tikun13 Compliance Checker",
        description="metadata.product.name"
    )
    product_vendor_name: str = Field(
        default="Amendment 13 Assessment Tool",
        description="metadata.product.vendor_name"
    )
    product_version: str = Field(
        default="1.0.0",
        description="metadata.product.version"
    )
    product_uid: str = Field(
        default="tikun13-checker",
        description="finding_info.product_uid"
    )

    # =========================================================================
    # Identifiers
    # =========================================================================

    uid_prefix: str = Field(default="tikun13", description="Finding UID prefix")
    recommendation_uid_prefix: str = Field(
        default="rec",
        description="Recommendation UID prefix"
    )

    # =========================================================================
    # Privacy
    # =========================================================================

    redacted_answer_fields: List[str] = Field(
        default_factory=list,
        description=(
            "Extra answer keys stripped before export, on top of "
            "organization_name and contact_details"
        )
    )

    @property
    def product(self) -> Dict[str, str]:
        """OCSF product descriptor."""
        return {
            "name": self.product_name,
            "vendor_name": self.product_vendor_name,
            "version": self.product_version,
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are loaded only once.

    Returns:
        Settings instance
    """
    return Settings()


# Convenience alias
settings = get_settings()
