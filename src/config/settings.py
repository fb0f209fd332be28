"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use COLALIGN_ prefix (e.g., COLALIGN_TAB_SIZE=4).

Settings can also be loaded from a .env file in the working directory.
Command line flags always take precedence over these values.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use COLALIGN_ prefix.

    Examples:
        COLALIGN_TAB_SIZE=4
        COLALIGN_SPACES_BEFORE=0
        COLALIGN_DEFAULT_MATCHER=literal
    """

    model_config = SettingsConfigDict(
        env_prefix="COLALIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Line preparation
    tab_size: int = Field(
        default=8,
        ge=1,
        description="Tab stop width used when expanding tabs before matching",
    )

    # Separator spacing
    spaces_before: int = Field(
        default=1,
        ge=0,
        description="Spaces inserted between the padded field and the separator",
    )

    spaces_after: int = Field(
        default=1,
        ge=0,
        description="Spaces inserted after the separator",
    )

    # Pattern defaults (active until a CLI flag changes them)
    default_matcher: Literal["literal", "regex"] = Field(
        default="regex",
        description="Matcher kind for patterns declared before any -F/-P flag",
    )

    default_side: Literal["before", "after"] = Field(
        default="before",
        description="Alignment side for patterns declared before any -a/-b flag",
    )

    default_justify: Literal["left", "right"] = Field(
        default="left",
        description="Separator justification for patterns declared before any -l/-r flag",
    )

    # Input decoding
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read input files and standard input, and to write output",
    )

    encoding_errors: str = Field(
        default="surrogateescape",
        description="Decode error handler; surrogateescape keeps undecodable bytes intact",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
