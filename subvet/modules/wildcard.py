from __future__ import annotations

import asyncio
import logging
import re
import secrets

from ..models.results import RiskLevel, ScanResult, TakeoverStatus, WildcardProbeResult
from ..utils.dns import DnsClient

logger = logging.getLogger(__name__)

WILDCARD_PROBE_COUNT = 3
WILDCARD_CONFIDENCE_PENALTY = 2
PROBE_LABEL_PREFIX = "subvet-wc-"

CONFIDENCE_NOTE_RE = re.compile(r"^Confidence: (\d+)/10$")

# risk -> (lowered risk, status override or None)
_STEP_DOWN = {
    RiskLevel.critical: (RiskLevel.high, TakeoverStatus.likely),
    RiskLevel.high: (RiskLevel.medium, TakeoverStatus.potential),
    RiskLevel.medium: (RiskLevel.low, None),
}


def probe_name(base_domain: str) -> str:
    return f"{PROBE_LABEL_PREFIX}{secrets.token_hex(8)}.{base_domain}"


async def _probe_ips(name: str, dns_client: DnsClient) -> set[str]:
    outcomes = await asyncio.gather(
        dns_client.query(name, "A"),
        dns_client.query(name, "AAAA"),
        return_exceptions=True,
    )
    ips: set[str] = set()
    for outcome in outcomes:
        if isinstance(outcome, list):
            ips.update(outcome)
    return ips


async def check_wildcard(base_domain: str, dns_client: DnsClient, verbose: bool = False) -> WildcardProbeResult:
    """Probe ``base_domain`` with random labels to detect a DNS catch-all.

    The zone counts as wildcard only when every probe resolves and the probes
    share at least one IP; the reported set is that shared set.
    Never raises.
    """
    try:
        probes = await asyncio.gather(
            *(_probe_ips(probe_name(base_domain), dns_client) for _ in range(WILDCARD_PROBE_COUNT))
        )
        if not probes or not all(probes):
            return WildcardProbeResult()
        ips = set.intersection(*probes)
        if not ips:
            return WildcardProbeResult()
        logger.info("wildcard dns detected", extra={"domain": base_domain, "ips": sorted(ips)})
        return WildcardProbeResult(is_wildcard=True, wildcard_ips=sorted(ips))
    except Exception as exc:
        if verbose:
            logger.warning("wildcard probe failed", extra={"domain": base_domain, "error": str(exc)})
        return WildcardProbeResult()


def has_dns_dangling_vulnerability(result: ScanResult) -> bool:
    dns = result.dns
    return bool(dns.ns_dangling or dns.mx_dangling or dns.spf_dangling or dns.srv_dangling)


def _reduce_confidence(result: ScanResult) -> ScanResult:
    evidence = []
    for note in result.evidence:
        match = CONFIDENCE_NOTE_RE.match(note)
        if match:
            note = f"Confidence: {max(0, int(match.group(1)) - WILDCARD_CONFIDENCE_PENALTY)}/10"
        evidence.append(note)
    confidence = result.confidence
    if confidence is not None:
        confidence = max(0, confidence - WILDCARD_CONFIDENCE_PENALTY)
    return result.model_copy(update={"evidence": tuple(evidence), "confidence": confidence})


def apply_wildcard_adjustment(result: ScanResult, probe: WildcardProbeResult) -> ScanResult:
    """Downgrade results that a DNS catch-all can explain.

    Confirmed NS/MX/SPF/SRV dangling records are left alone.
    """
    if not probe.is_wildcard:
        return result

    result = result.with_evidence("Wildcard DNS detected")
    if has_dns_dangling_vulnerability(result):
        return result.with_evidence("Wildcard adjustment skipped: DNS dangling vulnerability confirmed")

    ips = result.dns.values("A", "AAAA")
    wildcard_ips = set(probe.wildcard_ips)
    match_count = sum(1 for ip in ips if ip in wildcard_ips)
    has_cname = result.dns.has_cname_record

    if has_cname or not ips:
        return result
    if match_count == len(ips):
        return result.classify(
            TakeoverStatus.not_vulnerable,
            RiskLevel.info,
            f"All IPs match wildcard set [{', '.join(probe.wildcard_ips)}]",
        )
    if match_count > 0:
        result = _reduce_confidence(result)
        return result.with_evidence(f"Partial wildcard IP match ({match_count}/{len(ips)}): confidence reduced")

    result = result.with_evidence("No CNAME in wildcard domain: confidence reduced")
    if result.risk not in _STEP_DOWN:
        return result
    risk, status = _STEP_DOWN[result.risk]
    return result.model_copy(update={"risk": risk, "status": status or result.status})
