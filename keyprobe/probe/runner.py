"""One diagnostic pass over the configured key sources."""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from structlog.stdlib import BoundLogger

from keyprobe.core.errors import KeyProbeError
from keyprobe.core.logging import get_logger
from keyprobe.crypto.claims_issuer import ClaimsIssuer
from keyprobe.probe.types import (
    AttemptResult,
    AttemptState,
    Issued,
    LoadFailed,
    ProbeReport,
    SignFailed,
)
from keyprobe.sources.types import KeySource


def run_attempt(
    source: KeySource,
    issuer: ClaimsIssuer,
    *,
    log: BoundLogger | None = None,
    now: datetime | None = None,
) -> AttemptResult:
    """Load keys from one source and issue a token with them."""
    log = (log or get_logger(__name__)).bind(source=source.kind)

    log.debug("attempt_state", state=AttemptState.LOADING)
    try:
        keys = source.load()
    except KeyProbeError as exc:
        log.error("key_load_failed", kind=exc.kind, error=exc.message)
        return AttemptResult(
            source_name=source.kind, outcome=LoadFailed(error=exc.describe())
        )

    log.debug("attempt_state", state=AttemptState.LOADED)
    log.debug("attempt_state", state=AttemptState.SIGNING)
    try:
        token = issuer.issue(keys, now=now)
    except KeyProbeError as exc:
        log.error("token_sign_failed", kind=exc.kind, error=exc.message)
        return AttemptResult(
            source_name=source.kind, outcome=SignFailed(error=exc.describe())
        )

    log.info("token_issued", token=token)
    return AttemptResult(source_name=source.kind, outcome=Issued(token=token))


def run_probe(
    sources: Sequence[KeySource],
    issuer: ClaimsIssuer,
    *,
    log: BoundLogger | None = None,
    now: datetime | None = None,
    max_workers: int = 1,
) -> ProbeReport:
    """Attempt every source exactly once and collect results in source order."""
    log = log or get_logger(__name__)

    def attempt(source: KeySource) -> AttemptResult:
        return run_attempt(source, issuer, log=log, now=now)

    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(attempt, sources))
    else:
        results = [attempt(source) for source in sources]

    report = ProbeReport(results=results)
    log.info("probe_finished", passed=report.passed, failures=len(report.failures))
    return report
