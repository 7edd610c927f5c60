from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from .. import __version__
from ..fingerprints import FingerprintDatabase, load_fingerprint_database
from ..models.config import ScanOptions
from ..models.results import ScanOutput, ScanResult, ScanSummary, TakeoverStatus
from ..modules.decision import Prober
from ..modules.wildcard import check_wildcard
from ..pipeline.context import ScanContext
from ..utils.dns import DnsClient
from ..utils.http import HttpProber
from ..utils.normalize import normalize_domain, registrable_domain

logger = logging.getLogger(__name__)


def summarize(results: list[ScanResult]) -> ScanSummary:
    def count(status: TakeoverStatus) -> int:
        return sum(1 for r in results if r.status == status)

    return ScanSummary(
        total=len(results),
        vulnerable=count(TakeoverStatus.vulnerable),
        likely=count(TakeoverStatus.likely),
        potential=count(TakeoverStatus.potential),
        safe=count(TakeoverStatus.not_vulnerable),
        errors=sum(1 for r in results if r.dns.error is not None),
    )


async def precompute_wildcards(context: ScanContext, hosts: list[str]) -> dict[str, str]:
    """Probe each distinct base domain once. Returns the host -> base mapping."""
    bases = {host: registrable_domain(host) for host in hosts}
    unique = list(dict.fromkeys(bases.values()))
    probes = await asyncio.gather(
        *(check_wildcard(base, context.dns_client, context.options.verbose) for base in unique)
    )
    context.wildcard_cache.update(zip(unique, probes))
    return bases


async def scan_hosts(context: ScanContext, hosts: list[str]) -> list[ScanResult]:
    bases = await precompute_wildcards(context, hosts)
    batch_size = context.options.concurrency
    results: list[ScanResult] = []
    for start in range(0, len(hosts), batch_size):
        batch = hosts[start:start + batch_size]
        results.extend(
            await asyncio.gather(
                *(context.engine.scan_one(host, context.wildcard_cache.get(bases[host])) for host in batch)
            )
        )
        if context.options.verbose:
            logger.info("scan progress", extra={"done": len(results), "total": len(hosts)})
    return results


async def run_scan(
    hosts: Iterable[str],
    options: Optional[ScanOptions] = None,
    database: Optional[FingerprintDatabase] = None,
    dns_client: Optional[DnsClient] = None,
    prober: Optional[Prober] = None,
) -> ScanOutput:
    options = options or ScanOptions()
    database = database or load_fingerprint_database()
    dns_client = dns_client or DnsClient(timeout_seconds=options.timeout_seconds)

    owned_prober: Optional[HttpProber] = None
    if prober is None and options.http_probe:
        owned_prober = HttpProber(
            timeout_seconds=options.timeout_seconds,
            follow_redirects=options.follow_redirects,
            max_body_bytes=options.max_body_bytes,
        )
        prober = owned_prober

    targets = list(dict.fromkeys(h for h in (normalize_domain(h) for h in hosts) if h))
    context = ScanContext.build(options, database, dns_client, prober)
    logger.info("scan started", extra={"hosts": len(targets), "services": len(database)})
    try:
        results = await scan_hosts(context, targets)
    finally:
        if owned_prober is not None:
            await owned_prober.close()

    summary = summarize(results)
    logger.info("scan finished", extra=summary.model_dump())
    return ScanOutput(
        version=__version__,
        timestamp=datetime.now(timezone.utc),
        target=targets[0] if len(targets) == 1 else f"{len(targets)} subdomains",
        options=options,
        summary=summary,
        results=results,
    )


def run_scan_sync(hosts: Iterable[str], options: Optional[ScanOptions] = None, **kwargs) -> ScanOutput:
    return asyncio.run(run_scan(hosts, options, **kwargs))
