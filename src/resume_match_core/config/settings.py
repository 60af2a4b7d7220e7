"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from resume_match_core.constants import DEFAULT_SOFT_SKILLS_EXPECTED


class Settings(BaseSettings):
    """Central configuration for resume-match.

    Scoring weights are versioned constants and deliberately not
    configurable here; see resume_match_core.constants.
    """

    model_config = SettingsConfigDict(env_prefix="RM_", env_file=".env")

    # --- Logging ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for log shippers",
    )

    # --- Assembly defaults ---
    default_soft_skills_expected: int = Field(
        default=DEFAULT_SOFT_SKILLS_EXPECTED,
        ge=1,
        le=8,
        description="Expected soft skill count when the skills analyzer reports none",
    )

    # --- Reporting ---
    top_fixes_limit: int = Field(
        default=3,
        ge=1,
        le=7,
        description="Number of improvement opportunities to report",
    )
    recommended_skills_limit: int = Field(
        default=3,
        ge=0,
        description="Number of missing skills to recommend",
    )
