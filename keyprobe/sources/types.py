"""Key sources: the interchangeable ways of obtaining the signing keypair."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from keyprobe.core.settings import KeySourceSettings
from keyprobe.crypto.keys import key_material_from_der
from keyprobe.crypto.types import KeyMaterial
from keyprobe.sources.decoding import (
    merge_env_file,
    read_b64_env,
    read_b64_file,
    read_key_bytes,
)


class FileSource(BaseModel):
    """DER keys stored as raw binary files."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    private_path: Path
    public_path: Path

    def load(self) -> KeyMaterial:
        """Read both DER files and parse them."""
        private_der = read_key_bytes(self.private_path)
        public_der = read_key_bytes(self.public_path)
        return key_material_from_der(private_der, public_der)


class Base64FileSource(BaseModel):
    """DER keys stored as base64 text files."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["base64_file"] = "base64_file"
    private_path: Path
    public_path: Path

    def load(self) -> KeyMaterial:
        """Read both base64 files and decode them to DER."""
        private_der = read_b64_file(self.private_path)
        public_der = read_b64_file(self.public_path)
        return key_material_from_der(private_der, public_der)


class EnvBase64Source(BaseModel):
    """DER keys held as base64 text in environment variables.

    The optional env file is merged into the process environment first;
    variables that are already set keep their values.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["env_base64"] = "env_base64"
    private_var: str
    public_var: str
    env_file: Path | None = None

    def load(self) -> KeyMaterial:
        """Merge the env file, then decode both variables to DER."""
        merge_env_file(self.env_file)
        private_der = read_b64_env(self.private_var)
        public_der = read_b64_env(self.public_var)
        return key_material_from_der(private_der, public_der)


KeySource = Annotated[
    FileSource | Base64FileSource | EnvBase64Source,
    Field(discriminator="kind"),
]


def default_sources(settings: KeySourceSettings) -> list[KeySource]:
    """Build the three sources in reporting order."""
    return [
        FileSource(
            private_path=settings.private_der,
            public_path=settings.public_der,
        ),
        Base64FileSource(
            private_path=settings.private_der_b64,
            public_path=settings.public_der_b64,
        ),
        EnvBase64Source(
            private_var=settings.private_env_var,
            public_var=settings.public_env_var,
            env_file=settings.env_file,
        ),
    ]
