"""Application settings loaded from environment variables."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

TOKEN_TTL_DAYS_DEFAULT = 7
TOKEN_SUBJECT_DEFAULT = "test@domain.com"
TOKEN_ISSUER_DEFAULT = "keyprobe"

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class KeySourceSettings(BaseSettings):
    """Locations of the keypair for each key source."""

    model_config = SettingsConfigDict(env_prefix="KEYPROBE_")

    private_der: Path = Path("private.der")
    public_der: Path = Path("public.der")
    private_der_b64: Path = Path("private.der.b64")
    public_der_b64: Path = Path("public.der.b64")
    private_env_var: str = "JWT_PRIVATE"
    public_env_var: str = "JWT_PUBLIC"
    env_file: Path = Path(".env")

    def under(self, directory: Path) -> "KeySourceSettings":
        """Resolve relative key and env file paths against a directory."""
        return self.model_copy(
            update={
                name: directory / getattr(self, name)
                for name in (
                    "private_der",
                    "public_der",
                    "private_der_b64",
                    "public_der_b64",
                    "env_file",
                )
                if not getattr(self, name).is_absolute()
            }
        )


class IssuerSettings(BaseSettings):
    """Claims used for issued tokens."""

    model_config = SettingsConfigDict(env_prefix="KEYPROBE_TOKEN_")

    subject: str = TOKEN_SUBJECT_DEFAULT
    issuer: str = TOKEN_ISSUER_DEFAULT
    ttl_days: int = Field(default=TOKEN_TTL_DAYS_DEFAULT, gt=0)


class LoggingSettings(BaseSettings):
    """Log output settings."""

    model_config = SettingsConfigDict(env_prefix="KEYPROBE_LOG_")

    level: LogLevel = "debug"
    render_json: bool = False
