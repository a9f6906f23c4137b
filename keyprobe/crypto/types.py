"""Type definitions for key material and token claims."""

from typing import Literal

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey
from pydantic import BaseModel, ConfigDict

DerFormat = Literal["pkcs1", "pkcs8"]


class KeyMaterial(BaseModel):
    """An RSA signing key and its verification key."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    signing_key: RSAPrivateKey
    verification_key: RSAPublicKey


class DerKeyPair(BaseModel):
    """DER-encoded private and public key bytes."""

    model_config = ConfigDict(frozen=True)

    private_der: bytes
    public_der: bytes


class TokenClaims(BaseModel):
    """Claims carried by an issued token."""

    model_config = ConfigDict(frozen=True)

    sub: str
    iss: str
    exp: int
