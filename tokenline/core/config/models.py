"""Pydantic configuration models for Tokenline.

For loading logic, see loader.py.
"""

from pydantic import BaseModel, Field, field_validator


class SlackConfig(BaseModel):
    """Slash-command verification settings."""

    token: str = Field(description="Shared verification token Slack sends with every command")
    command: str | None = Field(
        default="/token",
        description="Expected slash-command name (None = accept any)",
    )
    allowed_teams: list[str] = Field(
        default_factory=list,
        description="Team IDs allowed to use the service (empty = allow all)",
    )

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Reject an empty shared secret."""
        if not v.strip():
            raise ValueError("slack.token must not be empty")
        return v


class ApiConfig(BaseModel):
    """HTTP server settings."""

    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, description="Bind port")


class LoggingConfig(BaseModel):
    """Configuration for logging system."""

    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid logging level '{v}'")
        return level


class Config(BaseModel):
    """Root configuration for Tokenline."""

    slack: SlackConfig
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "ignore"}
