"""Runtime configuration for zenode-cli.

Settings come from ``ZENODE_*`` environment variables and a dotenv file
(``.env`` in the working directory unless overridden).  They are loaded
once by the CLI entry point and passed explicitly into the Operator
constructor — nothing reads them as global state.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from zenode_cli.exceptions import ConfigurationError

DEFAULT_ENV_FILE: str = ".env"
DEFAULT_ENDPOINT: str = "http://localhost:2020/graphql"


class Settings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ZENODE_",
        extra="ignore",
        case_sensitive=False,
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
    )

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        min_length=1,
        description="URL of the node that executes schema and instance operations.",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    key_pair_path: Path | None = Field(
        default=None,
        description="Signing key pair used by the node tooling; only reported by doctor.",
    )
    debug: bool = Field(
        default=False,
        description="Emit debug logging on stderr.",
    )


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build :class:`Settings`, reading *env_file* instead of ``.env`` if given.

    Raises
    ------
    ConfigurationError
        When a value fails validation.
    """
    try:
        if env_file is None:
            return Settings()
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration: {problems}",
            hint="Check ZENODE_* environment variables and your .env file.",
        ) from exc
