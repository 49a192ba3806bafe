"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from orgsocial.domain.value.types import ReparsePolicy


class DocumentSettings(BaseModel):
    """Local org-social document configuration."""

    # Path of the user's own social.org file
    path: Path = Path("social.org")

    # Public URL the document is served from
    # Used as the source of own posts and for mention detection
    source_url: str | None = None


class NetworkSettings(BaseModel):
    """Configuration for fetching followed documents."""

    # Per-request timeout in seconds (None disables the timeout)
    timeout_seconds: float | None = 10.0

    user_agent: str = "org-social-py/0.1"


class ComposeSettings(BaseModel):
    """Post composition configuration."""

    # Written to the CLIENT property of composed posts
    client_label: str = "org-social-py"


class ParsingSettings(BaseModel):
    """Document parsing configuration."""

    # Whether content edits re-derive tokens and blocks immediately
    reparse_policy: ReparsePolicy = ReparsePolicy.AUTO


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested sections use ``__``:

        DOCUMENT__PATH=/home/me/social.org
        DOCUMENT__SOURCE_URL=https://example.com/social.org
        NETWORK__TIMEOUT_SECONDS=5
        PARSING__REPARSE_POLICY=manual
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows DOCUMENT__PATH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Host configuration
    host: str = "localhost"
    port: int = 8000

    # Nested settings
    document: DocumentSettings = DocumentSettings()
    network: NetworkSettings = NetworkSettings()
    compose: ComposeSettings = ComposeSettings()
    parsing: ParsingSettings = ParsingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

