"""Signed token issuance using RS256."""

from datetime import UTC, datetime, timedelta

import jwt
from structlog.stdlib import BoundLogger

from keyprobe.core.errors import TokenCreationError
from keyprobe.core.logging import get_logger
from keyprobe.core.settings import (
    TOKEN_ISSUER_DEFAULT,
    TOKEN_SUBJECT_DEFAULT,
    TOKEN_TTL_DAYS_DEFAULT,
    IssuerSettings,
)
from keyprobe.crypto.types import KeyMaterial, TokenClaims

TOKEN_ALGORITHM = "RS256"


class ClaimsIssuer:
    """Builds claims and signs them into compact RS256 tokens."""

    def __init__(
        self,
        subject: str = TOKEN_SUBJECT_DEFAULT,
        issuer: str = TOKEN_ISSUER_DEFAULT,
        ttl: timedelta = timedelta(days=TOKEN_TTL_DAYS_DEFAULT),
        log: BoundLogger | None = None,
    ) -> None:
        if ttl <= timedelta(0):
            raise ValueError("token ttl must be positive")
        self._subject = subject
        self._issuer = issuer
        self._ttl = ttl
        self._log = log or get_logger(__name__)

    @classmethod
    def from_settings(
        cls, settings: IssuerSettings, log: BoundLogger | None = None
    ) -> "ClaimsIssuer":
        """Create an issuer from IssuerSettings."""
        return cls(
            subject=settings.subject,
            issuer=settings.issuer,
            ttl=timedelta(days=settings.ttl_days),
            log=log,
        )

    def build_claims(self, now: datetime) -> TokenClaims:
        """Build claims expiring one ttl after ``now``."""
        return TokenClaims(
            sub=self._subject,
            iss=self._issuer,
            exp=int((now + self._ttl).timestamp()),
        )

    def issue(self, keys: KeyMaterial, now: datetime | None = None) -> str:
        """Sign fresh claims with the signing key and return the token."""
        claims = self.build_claims(now or datetime.now(UTC))
        try:
            return jwt.encode(
                claims.model_dump(),
                keys.signing_key,
                algorithm=TOKEN_ALGORITHM,
                headers={"typ": "JWT"},
            )
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            self._log.error("token_creation_failed", error=repr(exc))
            raise TokenCreationError() from exc
