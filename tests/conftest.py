"""Shared test fixtures for keyprobe."""

import os
from pathlib import Path

import pytest
import structlog
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from structlog.stdlib import BoundLogger
from structlog.testing import CapturingLogger

from keyprobe.core.settings import KeySourceSettings
from keyprobe.crypto.keys import (
    encode_b64,
    export_der_keypair,
    generate_rsa_private_key,
)
from keyprobe.crypto.types import DerKeyPair

TEST_KEY_SIZE = 2048


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test in an empty directory with no key variables set."""
    for name in list(os.environ):
        if name.startswith("KEYPROBE_") or name in ("JWT_PRIVATE", "JWT_PUBLIC"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(scope="session")
def rsa_key() -> RSAPrivateKey:
    """One RSA key shared by the whole session."""
    return generate_rsa_private_key(TEST_KEY_SIZE)


@pytest.fixture
def der_pair(rsa_key: RSAPrivateKey) -> DerKeyPair:
    """PKCS#1 DER encoding of the session key."""
    return export_der_keypair(rsa_key, "pkcs1")


@pytest.fixture
def key_settings(tmp_path: Path) -> KeySourceSettings:
    """Key source settings rooted in the test directory."""
    return KeySourceSettings().under(tmp_path)


@pytest.fixture
def key_files(
    der_pair: DerKeyPair, key_settings: KeySourceSettings
) -> KeySourceSettings:
    """Write DER and base64 key files, leaving the env file absent."""
    key_settings.private_der.write_bytes(der_pair.private_der)
    key_settings.public_der.write_bytes(der_pair.public_der)
    key_settings.private_der_b64.write_text(encode_b64(der_pair.private_der))
    key_settings.public_der_b64.write_text(encode_b64(der_pair.public_der))
    return key_settings


@pytest.fixture
def key_env(der_pair: DerKeyPair, monkeypatch: pytest.MonkeyPatch) -> None:
    """Expose the key pair as base64 environment variables."""
    monkeypatch.setenv("JWT_PRIVATE", encode_b64(der_pair.private_der))
    monkeypatch.setenv("JWT_PUBLIC", encode_b64(der_pair.public_der))


@pytest.fixture
def captured_log() -> tuple[BoundLogger, CapturingLogger]:
    """A logger whose events are recorded instead of printed."""
    cap = CapturingLogger()
    log = structlog.wrap_logger(
        cap,
        processors=[structlog.processors.add_log_level],
        wrapper_class=BoundLogger,
    )
    return log, cap
