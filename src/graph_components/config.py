"""Application configuration using pydantic-settings."""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from graph_components.models import DEFAULT_PALETTE, RegistrationPolicy

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GRAPH_COMPONENTS_",
        extra="ignore",
    )

    # Component coloring
    palette: str = Field(
        default=",".join(DEFAULT_PALETTE),
        description="Comma-separated hex colors handed out to components in order",
    )

    # Disjoint-set behaviour
    registration_policy: RegistrationPolicy = Field(
        default=RegistrationPolicy.TOLERANT,
        description="tolerant: auto-register unknown ids; strict: reject them",
    )

    # Editor validation
    vertex_name_pattern: str = Field(
        default=r"^[a-zA-Z0-9_-]+$",
        description="Regex a user-supplied vertex name must match",
    )

    # Logging
    log_json: bool = Field(default=False, description="Emit JSON log lines")
    debug: bool = Field(default=False, description="Enable debug-level logging")

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, v: str) -> str:
        """Require at least one color and only #RGB / #RRGGBB entries."""
        colors = [c.strip() for c in v.split(",") if c.strip()]
        if not colors:
            raise ValueError("palette must contain at least one color")
        bad = [c for c in colors if not _HEX_COLOR.match(c)]
        if bad:
            raise ValueError(f"invalid palette colors: {', '.join(bad)}")
        return v

    @field_validator("vertex_name_pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid vertex name pattern: {e}") from e
        return v

    def get_palette(self) -> tuple[str, ...]:
        """Parse the palette string into a tuple of colors."""
        return tuple(c.strip() for c in self.palette.split(",") if c.strip())
