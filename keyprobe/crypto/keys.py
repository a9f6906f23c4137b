"""RSA key parsing from DER, key generation, and DER export."""

import base64

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from keyprobe.core.errors import KeyParseError
from keyprobe.crypto.types import DerFormat, DerKeyPair, KeyMaterial

RSA_KEY_SIZE = 3072
RSA_PUBLIC_EXPONENT = 65537

_PRIVATE_FORMATS = {
    "pkcs1": serialization.PrivateFormat.TraditionalOpenSSL,
    "pkcs8": serialization.PrivateFormat.PKCS8,
}
_PUBLIC_FORMATS = {
    "pkcs1": serialization.PublicFormat.PKCS1,
    "pkcs8": serialization.PublicFormat.SubjectPublicKeyInfo,
}


def load_private_key_der(der: bytes) -> RSAPrivateKey:
    """Parse a PKCS#1 or PKCS#8 DER private key."""
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyParseError("private", str(exc) or type(exc).__name__) from exc
    if not isinstance(key, RSAPrivateKey):
        raise KeyParseError("private", f"expected an RSA key, got {type(key).__name__}")
    return key


def load_public_key_der(der: bytes) -> RSAPublicKey:
    """Parse a SubjectPublicKeyInfo or PKCS#1 DER public key."""
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise KeyParseError("public", str(exc) or type(exc).__name__) from exc
    if not isinstance(key, RSAPublicKey):
        raise KeyParseError("public", f"expected an RSA key, got {type(key).__name__}")
    return key


def key_material_from_der(private_der: bytes, public_der: bytes) -> KeyMaterial:
    """Build KeyMaterial from raw DER buffers, failing on the first bad key."""
    return KeyMaterial(
        signing_key=load_private_key_der(private_der),
        verification_key=load_public_key_der(public_der),
    )


def generate_rsa_private_key(key_size: int = RSA_KEY_SIZE) -> RSAPrivateKey:
    """Generate a new RSA private key for token signing."""
    return rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=key_size,
    )


def export_der_keypair(
    private_key: RSAPrivateKey, fmt: DerFormat = "pkcs1"
) -> DerKeyPair:
    """Serialize a private key and its public half as DER.

    ``pkcs1`` writes a traditional RSA private key and an ``RSAPublicKey``
    structure; ``pkcs8`` writes a PKCS#8 private key and a
    SubjectPublicKeyInfo public key.
    """
    private_der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=_PRIVATE_FORMATS[fmt],
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=_PUBLIC_FORMATS[fmt],
    )
    return DerKeyPair(private_der=private_der, public_der=public_der)


def encode_b64(data: bytes) -> str:
    """Encode bytes as single-line standard base64."""
    return base64.b64encode(data).decode()
