"""Error taxonomy for key loading and token issuance."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel


class FailureDetail(BaseModel):
    """Reportable description of a failed attempt phase."""

    kind: str
    message: str
    context: dict[str, str] = {}


class KeyProbeError(Exception):
    """Base class for every failure a key source or issuer can report."""

    kind: ClassVar[str] = "error"

    def __init__(self, message: str, context: dict[str, str] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def describe(self) -> FailureDetail:
        """Convert to a reportable failure detail."""
        return FailureDetail(kind=self.kind, message=self.message, context=self.context)


class FileReadError(KeyProbeError):
    """A key file could not be read."""

    kind = "file_read"

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        super().__init__(
            f"cannot read {path}: {cause}",
            {"path": str(path), "cause": type(cause).__name__},
        )


class Base64DecodeError(KeyProbeError):
    """Key text from a file or variable is not valid base64."""

    kind = "base64_decode"

    def __init__(self, origin: str, cause: Exception) -> None:
        self.origin = origin
        super().__init__(
            f"invalid base64 in {origin}: {cause}",
            {"origin": origin, "cause": str(cause)},
        )


class EnvVarNotFoundError(KeyProbeError):
    """A required environment variable is not set."""

    kind = "env_var_not_found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"environment variable {name} is not set", {"name": name})


class KeyParseError(KeyProbeError):
    """DER bytes do not hold usable RSA key material."""

    kind = "key_parse"

    def __init__(self, role: str, cause: str) -> None:
        self.role = role
        super().__init__(
            f"cannot parse {role} key: {cause}",
            {"role": role, "cause": cause},
        )


class TokenCreationError(KeyProbeError):
    """Signing the claims failed despite loaded key material."""

    kind = "token_creation"

    def __init__(self) -> None:
        super().__init__("token creation failed")
