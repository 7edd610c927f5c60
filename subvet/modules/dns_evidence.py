from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Optional

from ..models.config import ScanOptions
from ..models.results import DnsEvidence, DnsRecord
from ..utils.dns import DnsClient, DnsFailure, describe_failure
from ..utils.normalize import normalize_domain
from .mail_records import (
    find_spf,
    is_verification_token,
    parse_dmarc_report_domains,
    parse_spf_includes,
    parse_spf_references,
)

logger = logging.getLogger(__name__)

CNAME_CHAIN_MAX_DEPTH = 10

SRV_PREFIXES = (
    "_autodiscover._tcp",
    "_sip._tcp",
    "_sip._tls",
    "_xmpp-client._tcp",
    "_xmpp-server._tcp",
    "_caldav._tcp",
    "_carddav._tcp",
)


def _is_permanent(outcome) -> bool:
    return isinstance(outcome, DnsFailure) and outcome.permanent


def _existence(outcomes: Iterable) -> Optional[bool]:
    """True if any lookup answered, False if every lookup failed permanently, else None."""
    outcomes = list(outcomes)
    if any(isinstance(o, list) and o for o in outcomes):
        return True
    if all(_is_permanent(o) for o in outcomes):
        return False
    return None


def _transient_error(outcomes: Iterable) -> Optional[str]:
    for outcome in outcomes:
        if isinstance(outcome, DnsFailure):
            if not outcome.permanent:
                return describe_failure(outcome)
        elif isinstance(outcome, BaseException):
            return f"DNS query failed: {outcome}"
    return None


class DnsEvidenceCollector:
    """Gathers the DNS evidence for one host.

    Every lookup goes through ``DnsClient.query`` and is classified there as a
    permanent or transient failure. Only permanent outcomes can mark a host or
    a referenced target as missing; transient ones end up in ``error`` or are
    treated as inconclusive.
    """

    def __init__(self, dns_client: DnsClient, options: Optional[ScanOptions] = None) -> None:
        self.dns = dns_client
        self.options = options or ScanOptions()

    async def _gather(self, *queries: tuple[str, str]) -> list:
        return await asyncio.gather(
            *(self.dns.query(name, record_type) for name, record_type in queries),
            return_exceptions=True,
        )

    async def target_exists(self, name: str) -> Optional[bool]:
        """Tri-state A/AAAA existence for ``name``. Only ``False`` means dangling."""
        return _existence(await self._gather((name, "A"), (name, "AAAA")))

    async def txt_exists(self, name: str) -> Optional[bool]:
        return _existence(await self._gather((name, "TXT")))

    async def reference_exists(self, name: str) -> Optional[bool]:
        """A referenced domain exists if it has an address or any TXT record."""
        return _existence(await self._gather((name, "A"), (name, "AAAA"), (name, "TXT")))

    async def _follow_cname(self, host: str) -> tuple[list[str], Optional[str]]:
        try:
            first = await self.dns.query(host, "CNAME")
        except DnsFailure as exc:
            return [], (None if exc.permanent else describe_failure(exc))

        chain = [normalize_domain(first[0])]
        while len(chain) <= CNAME_CHAIN_MAX_DEPTH:
            try:
                nxt = await self.dns.query(chain[-1], "CNAME")
            except DnsFailure:
                break
            target = normalize_domain(nxt[0])
            if target in chain:
                break
            chain.append(target)
        return chain, None

    async def resolve(self, host: str) -> DnsEvidence:
        host = normalize_domain(host)
        records: list[DnsRecord] = []

        chain, error = await self._follow_cname(host)
        cname_transient = error is not None
        cname = chain[-1] if chain else None
        records.extend(DnsRecord(type="CNAME", value=hop) for hop in chain)

        a_result, aaaa_result = await self._gather((host, "A"), (host, "AAAA"))
        has_ipv4 = isinstance(a_result, list) and bool(a_result)
        has_ipv6 = isinstance(aaaa_result, list) and bool(aaaa_result)
        if has_ipv4:
            records.extend(DnsRecord(type="A", value=ip) for ip in a_result)
        if has_ipv6:
            records.extend(DnsRecord(type="AAAA", value=ip) for ip in aaaa_result)
        error = error or _transient_error([a_result, aaaa_result])

        nxdomain = False
        if cname is None:
            nxdomain = not cname_transient and _is_permanent(a_result) and _is_permanent(aaaa_result)
        elif not has_ipv4 and not has_ipv6:
            target_outcomes = await self._gather((cname, "A"), (cname, "AAAA"))
            state = _existence(target_outcomes)
            if state is False:
                nxdomain = True
            elif state is None:
                error = error or _transient_error(target_outcomes)

        evidence = DnsEvidence(
            host=host,
            records=records,
            cname=cname,
            has_ipv4=has_ipv4,
            has_ipv6=has_ipv6,
            resolved=bool(chain) or has_ipv4 or has_ipv6,
            nxdomain=nxdomain,
            error=error,
        )
        evidence = await self._run_checks(host, evidence)
        logger.debug(
            "dns evidence collected",
            extra={"host": host, "cname": cname, "nxdomain": nxdomain, "error": error},
        )
        return evidence

    async def _run_checks(self, host: str, evidence: DnsEvidence) -> DnsEvidence:
        checks = []
        if self.options.ns_check:
            checks.append(self.check_ns(host))
        if self.options.mx_check:
            checks.append(self.check_mx(host))
        if self.options.spf_check:
            checks.append(self.check_spf(host))
        if self.options.srv_check:
            checks.append(self.check_srv(host))
        if self.options.txt_check:
            checks.append(self.check_txt_references(host))
        if not checks:
            return evidence

        records = list(evidence.records)
        updates: dict = {}
        for outcome in await asyncio.gather(*checks, return_exceptions=True):
            if isinstance(outcome, BaseException):
                logger.warning("dns check failed", extra={"host": host, "error": str(outcome)})
                continue
            new_records, fields = outcome
            records.extend(new_records)
            updates.update(fields)
        return evidence.model_copy(update={"records": records, **updates})

    async def _dangling(self, targets: list[str], probe) -> list[str]:
        states = await asyncio.gather(*(probe(t) for t in targets))
        return [t for t, state in zip(targets, states) if state is False]

    async def check_ns(self, host: str) -> tuple[list[DnsRecord], dict]:
        try:
            values = await self.dns.query(host, "NS")
        except DnsFailure:
            return [], {}
        targets = [t for t in (normalize_domain(v) for v in values) if t]
        return (
            [DnsRecord(type="NS", value=t) for t in targets],
            {"ns_records": targets, "ns_dangling": await self._dangling(targets, self.target_exists)},
        )

    async def check_mx(self, host: str) -> tuple[list[DnsRecord], dict]:
        try:
            values = await self.dns.query(host, "MX")
        except DnsFailure:
            return [], {}
        records = []
        exchanges = []
        for value in values:
            preference, _, exchange = value.partition(" ")
            exchange = normalize_domain(exchange)
            # Null MX ("0 .") declares that the host accepts no mail.
            if not exchange:
                continue
            records.append(DnsRecord(type="MX", value=f"{preference} {exchange}"))
            exchanges.append(exchange)
        return records, {
            "mx_records": exchanges,
            "mx_dangling": await self._dangling(exchanges, self.target_exists),
        }

    async def check_spf(self, host: str) -> tuple[list[DnsRecord], dict]:
        try:
            values = await self.dns.query(host, "TXT")
        except DnsFailure:
            return [], {}
        spf = find_spf(values)
        if spf is None:
            return [], {}
        includes = parse_spf_includes(spf)
        return [DnsRecord(type="TXT", value=spf)], {
            "spf_record": spf,
            "spf_includes": includes,
            "spf_dangling": await self._dangling(includes, self.txt_exists),
        }

    async def check_srv(self, host: str) -> tuple[list[DnsRecord], dict]:
        outcomes = await self._gather(*((f"{prefix}.{host}", "SRV") for prefix in SRV_PREFIXES))
        records = []
        labels = []
        targets = []
        for prefix, outcome in zip(SRV_PREFIXES, outcomes):
            if not isinstance(outcome, list):
                continue
            for value in outcome:
                priority, weight, port, raw_target = value.split(" ", 3)
                target = normalize_domain(raw_target)
                label = f"{prefix}: {target or '.'}"
                records.append(DnsRecord(type="SRV", value=f"{prefix} {priority} {weight} {port} {target or '.'}"))
                labels.append(label)
                if target:
                    targets.append((label, target))

        states = await asyncio.gather(*(self.target_exists(t) for _, t in targets))
        dangling = [label for (label, _), state in zip(targets, states) if state is False]
        return records, {"srv_records": labels, "srv_dangling": dangling}

    async def check_txt_references(self, host: str) -> tuple[list[DnsRecord], dict]:
        host_txt, dmarc_txt = await self._gather((host, "TXT"), (f"_dmarc.{host}", "TXT"))
        refs: list[str] = []
        if isinstance(host_txt, list):
            usable = [r for r in host_txt if not is_verification_token(r)]
            spf = find_spf(usable)
            if spf:
                refs.extend(parse_spf_references(spf))
        if isinstance(dmarc_txt, list):
            for domain in parse_dmarc_report_domains(dmarc_txt):
                if domain not in refs:
                    refs.append(domain)
        refs = [r for r in refs if r != host]
        return [], {
            "txt_references": refs,
            "txt_dangling": await self._dangling(refs, self.reference_exists),
        }
