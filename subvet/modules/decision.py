"""Per-host takeover classification.

``DecisionEngine.scan_one`` threads a frozen ``ScanResult`` through a fixed
sequence of step functions. Each step returns the next copy; the order is:

1. DNS evidence
2. CNAME to known service
3. DNS fingerprint rules
4. NXDOMAIN fallback for a CNAME with no DNS rule hit
5. HTTP probe, fingerprint confidence, generic and stale-CNAME heuristics
6. Dangling NS/MX/SPF/SRV/TXT escalation
7. Finalize
8. Wildcard adjustment
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..fingerprints import FingerprintDatabase
from ..models.config import ScanOptions
from ..models.fingerprints import ServiceFingerprint
from ..models.results import (
    RISK_RANK,
    STATUS_RANK,
    HttpProbeResult,
    RiskLevel,
    ScanResult,
    TakeoverStatus,
    WildcardProbeResult,
)
from .dns_evidence import DnsEvidenceCollector
from .fingerprint_checker import (
    check_dns_fingerprints,
    check_fingerprints,
    check_generic_patterns,
    check_stale_cname,
)
from .wildcard import apply_wildcard_adjustment

logger = logging.getLogger(__name__)

CONFIDENCE_VULNERABLE = 7

NS_POC = "Register the dangling nameserver domain and configure DNS zone"
MX_POC = "Register the dangling mail server domain to intercept emails"
SPF_POC = "Register the dangling domain and create SPF record to bypass email authentication"
SRV_POC = "Register the dangling domain and configure the service to intercept traffic"
TXT_POC = "Register the dangling domain referenced in TXT records to potentially bypass SPF or claim verification"


class Prober(Protocol):
    async def probe(self, host: str) -> HttpProbeResult: ...


def _severity(status: TakeoverStatus, risk: RiskLevel) -> tuple[int, int]:
    return STATUS_RANK[status], RISK_RANK[risk]


def match_service(result: ScanResult, database: FingerprintDatabase) -> tuple[ScanResult, Optional[ServiceFingerprint]]:
    if not result.cname:
        return result, None
    service = database.find_by_cname(result.cname)
    if service is None:
        return result, None
    return result.with_evidence(f"CNAME points to {service.service}: {result.cname}", service=service.service), service


def apply_dns_fingerprints(result: ScanResult, service: Optional[ServiceFingerprint]) -> ScanResult:
    if service is None:
        return result
    matches = check_dns_fingerprints(service, result.dns, result.cname)
    if not matches:
        return result
    result = result.with_evidence(*matches)
    if not service.takeover_possible:
        return result.classify(TakeoverStatus.potential, RiskLevel.medium)
    if result.status == TakeoverStatus.unknown:
        # No HTTP confirmation yet, so never more than likely.
        return result.classify(TakeoverStatus.likely, RiskLevel.high, poc=service.poc)
    return result


def apply_nxdomain_fallback(result: ScanResult, service: Optional[ServiceFingerprint]) -> ScanResult:
    if result.status != TakeoverStatus.unknown or not result.cname or not result.dns.nxdomain:
        return result
    result = result.with_evidence("CNAME target returns NXDOMAIN")
    if service is not None and service.takeover_possible:
        return result.classify(TakeoverStatus.likely, RiskLevel.high, poc=service.poc)
    return result.classify(TakeoverStatus.potential, RiskLevel.medium)


def apply_http_fingerprints(result: ScanResult, service: Optional[ServiceFingerprint], http: HttpProbeResult) -> ScanResult:
    """Classify from the probe body: service rules, then the generic and stale-CNAME heuristics."""
    result = result.model_copy(update={"http": http})

    if service is not None and http.body:
        check = check_fingerprints(service, http)
        if check.matches:
            result = result.with_evidence(
                *check.matches,
                f"Confidence: {check.confidence}/10",
                confidence=check.confidence,
            )
            if check.negative_match:
                result = result.classify(TakeoverStatus.not_vulnerable, RiskLevel.info)
            elif not check.required_met:
                result = result.classify(TakeoverStatus.potential, RiskLevel.low, "Required fingerprint not matched")
            elif service.takeover_possible:
                if check.confidence >= CONFIDENCE_VULNERABLE:
                    status, risk = TakeoverStatus.vulnerable, RiskLevel.critical
                elif check.confidence >= service.min_confidence:
                    status, risk = TakeoverStatus.likely, RiskLevel.high
                else:
                    status, risk = TakeoverStatus.potential, RiskLevel.medium
                result = result.classify(status, risk, poc=service.poc)
            else:
                result = result.classify(TakeoverStatus.potential, RiskLevel.medium)

    if service is None and http.body:
        hints = check_generic_patterns(http.body, http.status)
        if hints:
            result = result.classify(TakeoverStatus.potential, RiskLevel.medium, *hints)

    if result.cname and result.status in (TakeoverStatus.not_vulnerable, TakeoverStatus.unknown):
        stale = check_stale_cname(result.cname, http)
        if stale:
            result = result.classify(
                TakeoverStatus.potential,
                RiskLevel.medium,
                *stale,
                service=result.service or "Stale CNAME",
            )
    return result


def apply_dangling_escalation(result: ScanResult) -> ScanResult:
    dns = result.dns
    if dns.ns_dangling:
        result = result.classify(
            TakeoverStatus.vulnerable,
            RiskLevel.critical,
            f"Dangling NS delegation: {', '.join(dns.ns_dangling)}",
            service="NS Delegation",
            poc=NS_POC,
        )
    for dangling, label, risk, service, poc in (
        (dns.mx_dangling, "Dangling MX record", RiskLevel.critical, "MX Record", MX_POC),
        (dns.spf_dangling, "Dangling SPF include", RiskLevel.high, "SPF Record", SPF_POC),
        (dns.srv_dangling, "Dangling SRV record", RiskLevel.high, "SRV Record", SRV_POC),
    ):
        if not dangling:
            continue
        result = result.with_evidence(f"{label}: {', '.join(dangling)}")
        if result.status != TakeoverStatus.vulnerable:
            result = result.classify(TakeoverStatus.vulnerable, risk, service=service, poc=poc)
    if dns.txt_dangling:
        result = result.with_evidence(f"Dangling TXT domain reference: {', '.join(dns.txt_dangling)}")
        if _severity(result.status, result.risk) < _severity(TakeoverStatus.potential, RiskLevel.medium):
            result = result.classify(
                TakeoverStatus.potential,
                RiskLevel.medium,
                service=result.service or "TXT Record",
                poc=TXT_POC,
            )
    return result


def finalize(result: ScanResult) -> ScanResult:
    if result.status != TakeoverStatus.unknown:
        return result
    if result.dns.resolved:
        return result.classify(TakeoverStatus.not_vulnerable, RiskLevel.info)
    if result.dns.error:
        return result.with_evidence(f"DNS error: {result.dns.error}")
    return result


class DecisionEngine:
    def __init__(
        self,
        collector: DnsEvidenceCollector,
        prober: Optional[Prober],
        database: FingerprintDatabase,
        options: Optional[ScanOptions] = None,
    ) -> None:
        self.collector = collector
        self.prober = prober
        self.database = database
        self.options = options or ScanOptions()

    async def scan_one(self, host: str, wildcard: Optional[WildcardProbeResult] = None) -> ScanResult:
        dns = await self.collector.resolve(host)
        result = ScanResult(host=dns.host, cname=dns.cname, dns=dns)

        result, service = match_service(result, self.database)
        result = apply_dns_fingerprints(result, service)
        result = apply_nxdomain_fallback(result, service)

        if self.options.http_probe and self.prober is not None and (dns.resolved or dns.nxdomain):
            http = await self.prober.probe(dns.host)
            result = apply_http_fingerprints(result, service, http)

        result = apply_dangling_escalation(result)
        result = finalize(result)
        if wildcard is not None:
            result = apply_wildcard_adjustment(result, wildcard)

        logger.debug(
            "host classified",
            extra={"host": result.host, "status": result.status.value, "risk": result.risk.value, "service": result.service},
        )
        return result
