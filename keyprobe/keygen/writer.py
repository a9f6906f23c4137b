"""Write a generated keypair in every form the key sources read."""

from pathlib import Path

from keyprobe.core.settings import KeySourceSettings
from keyprobe.crypto.keys import encode_b64
from keyprobe.crypto.types import DerKeyPair


def write_key_files(
    pair: DerKeyPair,
    settings: KeySourceSettings,
    *,
    write_env_file: bool = True,
) -> list[Path]:
    """Write DER files, base64 files, and optionally the env file.

    Existing files are overwritten. Returns the paths written.
    """
    private_b64 = encode_b64(pair.private_der)
    public_b64 = encode_b64(pair.public_der)

    settings.private_der.write_bytes(pair.private_der)
    settings.public_der.write_bytes(pair.public_der)
    settings.private_der_b64.write_text(private_b64, encoding="utf-8")
    settings.public_der_b64.write_text(public_b64, encoding="utf-8")
    written = [
        settings.private_der,
        settings.public_der,
        settings.private_der_b64,
        settings.public_der_b64,
    ]

    if write_env_file:
        settings.env_file.write_text(
            f"{settings.private_env_var}={private_b64}\n"
            f"{settings.public_env_var}={public_b64}\n",
            encoding="utf-8",
        )
        written.append(settings.env_file)
    return written
