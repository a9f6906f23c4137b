"""Type definitions for probe attempts and reports."""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from keyprobe.core.errors import FailureDetail


class AttemptState(StrEnum):
    """Lifecycle of one key source attempt."""

    LOADING = "loading"
    LOAD_FAILED = "load_failed"
    LOADED = "loaded"
    SIGNING = "signing"
    SIGN_FAILED = "sign_failed"
    ISSUED = "issued"


class Issued(BaseModel):
    """Keys loaded and a token was signed."""

    status: Literal["issued"] = "issued"
    token: str


class LoadFailed(BaseModel):
    """The source could not produce key material."""

    status: Literal["load_failed"] = "load_failed"
    error: FailureDetail


class SignFailed(BaseModel):
    """Keys loaded but signing failed."""

    status: Literal["sign_failed"] = "sign_failed"
    error: FailureDetail


Outcome = Annotated[Issued | LoadFailed | SignFailed, Field(discriminator="status")]


class AttemptResult(BaseModel):
    """Terminal outcome of one source attempt."""

    source_name: str
    outcome: Outcome

    @property
    def state(self) -> AttemptState:
        """Terminal state reached by the attempt."""
        return AttemptState(self.outcome.status)

    @property
    def token(self) -> str | None:
        """Issued token, or None when the attempt failed."""
        return self.outcome.token if isinstance(self.outcome, Issued) else None

    @property
    def error(self) -> FailureDetail | None:
        """Failure detail, or None when a token was issued."""
        return None if isinstance(self.outcome, Issued) else self.outcome.error


class ProbeReport(BaseModel):
    """Results of one pass over all key sources, in source order."""

    results: list[AttemptResult]

    @property
    def passed(self) -> bool:
        """True when every source issued a token."""
        return all(r.state is AttemptState.ISSUED for r in self.results)

    @property
    def failures(self) -> list[AttemptResult]:
        """Results that did not issue a token."""
        return [r for r in self.results if r.state is not AttemptState.ISSUED]

    def render_lines(self) -> list[str]:
        """Format one human-readable line per source."""
        lines = []
        for result in self.results:
            if result.token is not None:
                lines.append(f"{result.source_name}: issued token {result.token}")
                continue
            error = result.error
            assert error is not None
            lines.append(
                f"{result.source_name}: {result.state} [{error.kind}] {error.message}"
            )
        return lines
