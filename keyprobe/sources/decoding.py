"""Reading raw and base64-encoded key bytes from files and the environment."""

import base64
import os
from pathlib import Path

from dotenv import load_dotenv

from keyprobe.core.errors import Base64DecodeError, EnvVarNotFoundError, FileReadError
from keyprobe.core.logging import get_logger

logger = get_logger(__name__)


def read_key_bytes(path: Path) -> bytes:
    """Read a key file as raw bytes."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileReadError(path, exc) from exc


def decode_base64(text: str, origin: str) -> bytes:
    """Decode standard base64 after trimming surrounding whitespace."""
    try:
        return base64.b64decode(text.strip(), validate=True)
    except ValueError as exc:
        raise Base64DecodeError(origin, exc) from exc


def read_b64_file(path: Path) -> bytes:
    """Read a UTF-8 file holding base64 text and decode it."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, exc) from exc
    return decode_base64(text, str(path))


def read_b64_env(name: str) -> bytes:
    """Read an environment variable holding base64 text and decode it."""
    value = os.environ.get(name)
    if value is None:
        raise EnvVarNotFoundError(name)
    return decode_base64(value, name)


def merge_env_file(path: Path | None) -> bool:
    """Load an env file into the process environment without overriding.

    Returns True when the file was read. A missing file, an unreadable one,
    or one whose entries the environment refuses is logged and otherwise
    ignored.
    """
    if path is None:
        return False
    if not path.is_file():
        logger.debug("env_file_missing", path=str(path))
        return False
    try:
        load_dotenv(dotenv_path=path, override=False)
    except (OSError, ValueError) as exc:
        logger.warning("env_file_unreadable", path=str(path), error=repr(exc))
        return False
    return True
