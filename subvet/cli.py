from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .fingerprints import FingerprintDatabase, load_fingerprint_database
from .models.config import DEFAULT_CONCURRENCY, DEFAULT_TIMEOUT_MS, ScanOptions
from .pipeline.runner import run_scan_sync
from .utils.normalize import parse_hosts

app = typer.Typer(add_completion=False, help="Subdomain takeover scanner.")

_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": datetime.now(timezone.utc).isoformat(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        return json.dumps(payload, default=str)


def setup_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, handlers=[handler], force=True)


def collect_hosts(hosts: List[str], file: Optional[str]) -> list[str]:
    """Hosts from arguments plus ``--file`` (``-`` reads stdin), deduplicated."""
    chunks = list(hosts)
    if file == "-":
        chunks.append(sys.stdin.read())
    elif file:
        chunks.append(Path(file).read_text(encoding="utf-8"))
    return parse_hosts("\n".join(chunks))


def load_database(signatures_dir: Optional[str]) -> FingerprintDatabase:
    try:
        return load_fingerprint_database(signatures_dir)
    except (ValidationError, yaml.YAMLError) as exc:
        typer.echo(f"invalid signatures: {exc}", err=True)
        raise typer.Exit(2)


@app.command()
def scan(
    hosts: List[str] = typer.Argument(None, help="Hosts to scan; comma or newline separated lists are accepted."),
    file: Optional[str] = typer.Option(None, "--file", "-f", help="Read hosts from a file, or '-' for stdin."),
    timeout: int = typer.Option(DEFAULT_TIMEOUT_MS, "--timeout", "-t", help="Per-query timeout in milliseconds."),
    concurrency: int = typer.Option(DEFAULT_CONCURRENCY, "--concurrency", "-c", help="Hosts scanned per batch."),
    no_http: bool = typer.Option(False, "--no-http", help="Skip HTTP probing."),
    ns: bool = typer.Option(False, "--ns", help="Check NS delegations for dangling nameservers."),
    mx: bool = typer.Option(False, "--mx", help="Check MX exchanges for dangling mail servers."),
    spf: bool = typer.Option(False, "--spf", help="Check SPF includes for dangling domains."),
    srv: bool = typer.Option(False, "--srv", help="Check well-known SRV records for dangling targets."),
    txt: bool = typer.Option(False, "--txt", help="Check SPF/DMARC domain references for dangling domains."),
    signatures_dir: Optional[str] = typer.Option(None, "--signatures-dir", help="Directory of custom YAML signatures."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Scan hosts for subdomain takeover and print the results as JSON."""
    setup_logging(verbose)
    try:
        options = ScanOptions(
            timeout=timeout,
            concurrency=concurrency,
            http_probe=not no_http,
            ns_check=ns,
            mx_check=mx,
            spf_check=spf,
            srv_check=srv,
            txt_check=txt,
            verbose=verbose,
        )
    except ValidationError as exc:
        typer.echo(f"invalid configuration: {exc}", err=True)
        raise typer.Exit(2)
    database = load_database(signatures_dir)

    try:
        targets = collect_hosts(hosts or [], file)
    except OSError as exc:
        typer.echo(f"cannot read hosts: {exc}", err=True)
        raise typer.Exit(2)
    if not targets:
        typer.echo("no hosts to scan", err=True)
        raise typer.Exit(2)

    output = run_scan_sync(targets, options, database=database)
    typer.echo(output.model_dump_json(indent=2))


@app.command()
def services(
    signatures_dir: Optional[str] = typer.Option(None, "--signatures-dir", help="Directory of custom YAML signatures."),
) -> None:
    """List known services and whether takeover is possible."""
    setup_logging()
    database = load_database(signatures_dir)
    typer.echo(json.dumps(database.list_services(), indent=2))


@app.command()
def fingerprint(
    service: str = typer.Argument(..., help="Service name, case-insensitive."),
    signatures_dir: Optional[str] = typer.Option(None, "--signatures-dir", help="Directory of custom YAML signatures."),
) -> None:
    """Show the fingerprint definition of one service."""
    setup_logging()
    found = load_database(signatures_dir).get_by_name(service)
    if found is None:
        typer.echo(f"service not found: {service}", err=True)
        raise typer.Exit(1)
    typer.echo(found.model_dump_json(indent=2, exclude_none=True))
