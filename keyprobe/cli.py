"""Command line interface for probing key sources and generating keys."""

from pathlib import Path

import typer
from pydantic import ValidationError

from keyprobe.core.logging import configure_logging, get_logger
from keyprobe.core.settings import IssuerSettings, KeySourceSettings, LoggingSettings
from keyprobe.crypto.claims_issuer import ClaimsIssuer
from keyprobe.crypto.keys import (
    RSA_KEY_SIZE,
    export_der_keypair,
    generate_rsa_private_key,
)
from keyprobe.keygen.writer import write_key_files
from keyprobe.probe.runner import run_probe
from keyprobe.sources.types import default_sources

app = typer.Typer(help="Load an RSA keypair from each key source and issue a token")


@app.callback()
def main() -> None:
    """keyprobe CLI entry point."""
    try:
        log_settings = LoggingSettings()
    except ValidationError as exc:
        typer.echo(f"invalid logging settings: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(log_settings.level, log_settings.render_json)


@app.command("probe")
def probe(
    workers: int = typer.Option(1, min=1, help="Attempt sources on this many threads"),
    strict: bool = typer.Option(False, help="Exit with status 1 if any source fails"),
) -> None:
    """Try every key source once and print the outcome of each."""
    log = get_logger("keyprobe.probe")
    issuer = ClaimsIssuer.from_settings(IssuerSettings(), log=log)
    report = run_probe(
        default_sources(KeySourceSettings()),
        issuer,
        log=log,
        max_workers=workers,
    )
    for line in report.render_lines():
        typer.echo(line)
    if strict and not report.passed:
        raise typer.Exit(code=1)


@app.command("keygen")
def keygen(
    bits: int = typer.Option(RSA_KEY_SIZE, min=1024, help="RSA modulus size"),
    fmt: str = typer.Option("pkcs1", "--format", help="DER layout: pkcs1 or pkcs8"),
    out: Path = typer.Option(Path("."), help="Directory to write key files into"),
    env_file: bool = typer.Option(True, help="Also write the env file"),
) -> None:
    """Generate an RSA keypair and write it for every key source."""
    if fmt not in ("pkcs1", "pkcs8"):
        raise typer.BadParameter("must be pkcs1 or pkcs8", param_hint="--format")
    out.mkdir(parents=True, exist_ok=True)
    pair = export_der_keypair(generate_rsa_private_key(bits), fmt)
    settings = KeySourceSettings().under(out)
    for path in write_key_files(pair, settings, write_env_file=env_file):
        typer.echo(f"wrote {path}")


if __name__ == "__main__":
    app()
