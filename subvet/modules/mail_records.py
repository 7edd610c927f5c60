from __future__ import annotations

import re
from typing import List, Optional

from ..utils.normalize import is_valid_domain, normalize_domain

SPF_RE = re.compile(r"^v=spf1(\s|$)", re.IGNORECASE)
DMARC_RE = re.compile(r"v=DMARC1;\s*(.*)", re.IGNORECASE)
VERIFICATION_TOKEN_RE = re.compile(
    r"^(?:[a-z0-9_.-]+-(?:site-|domain-)?verification=|ms=|[a-z0-9_-]+-verify=)",
    re.IGNORECASE,
)

SPF_REFERENCE_PREFIXES = ("include:", "redirect=", "a:", "mx:")
SPF_QUALIFIERS = "+-~?"


def is_verification_token(record: str) -> bool:
    return bool(VERIFICATION_TOKEN_RE.match(record.strip()))


def find_spf(txt_records: List[str]) -> Optional[str]:
    for rec in txt_records:
        if SPF_RE.match(rec.strip()):
            return rec.strip()
    return None


def _reference_domain(value: str) -> Optional[str]:
    # a:/mx: may carry a CIDR suffix; macros cannot be resolved statically.
    value = value.split("/", 1)[0]
    if "%" in value:
        return None
    domain = normalize_domain(value)
    return domain if is_valid_domain(domain, service_labels=True) else None


def parse_spf_includes(record: str) -> list[str]:
    includes = []
    for part in record.split()[1:]:
        part = part.lstrip(SPF_QUALIFIERS)
        if part.lower().startswith("include:"):
            domain = _reference_domain(part.split(":", 1)[1])
            if domain and domain not in includes:
                includes.append(domain)
    return includes


def parse_spf_references(record: str) -> list[str]:
    """Domains an SPF record points at through include:, redirect=, a: and mx:."""
    refs = []
    for part in record.split()[1:]:
        part = part.lstrip(SPF_QUALIFIERS)
        lowered = part.lower()
        for prefix in SPF_REFERENCE_PREFIXES:
            if lowered.startswith(prefix):
                domain = _reference_domain(part[len(prefix):])
                if domain and domain not in refs:
                    refs.append(domain)
                break
    return refs


def _mailto_domains(value: str) -> list[str]:
    domains = []
    for item in value.split(","):
        item = item.strip()
        if not item.lower().startswith("mailto:") or "@" not in item:
            continue
        domain = _reference_domain(item.rsplit("@", 1)[1].split("!", 1)[0])
        if domain:
            domains.append(domain)
    return domains


def parse_dmarc_report_domains(txt_records: List[str]) -> list[str]:
    """Report-destination domains from the rua=/ruf= tags of a DMARC record."""
    domains: list[str] = []
    for rec in txt_records:
        match = DMARC_RE.search(rec)
        if not match:
            continue
        for tag in match.group(1).split(";"):
            tag = tag.strip()
            if tag.startswith(("rua=", "ruf=")):
                for domain in _mailto_domains(tag.split("=", 1)[1]):
                    if domain not in domains:
                        domains.append(domain)
        break
    return domains
