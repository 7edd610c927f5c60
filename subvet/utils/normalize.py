from __future__ import annotations

import re
from functools import lru_cache

import tldextract

LABEL_RE = re.compile(r"^[A-Za-z0-9-]+$")
SERVICE_LABEL_RE = re.compile(r"^_?[A-Za-z0-9-]+$")
TLD_RE = re.compile(r"^[A-Za-z]{2,}$")
HOST_SPLIT_RE = re.compile(r"[\r\n,]+")

# Bundled public suffix snapshot only; never fetch the list at scan time.
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())


def normalize_domain(domain: str) -> str:
    value = domain.strip()
    if value.endswith("."):
        value = value[:-1]
    return value.lower()


def is_valid_domain(domain: str, service_labels: bool = False) -> bool:
    """Hostname syntax check. ``service_labels`` also admits ``_spf``-style labels."""
    if not domain or len(domain) > 253:
        return False
    labels = domain.split(".")
    if len(labels) < 2:
        return False
    label_re = SERVICE_LABEL_RE if service_labels else LABEL_RE
    for label in labels:
        if not 1 <= len(label) <= 63:
            return False
        if label.startswith("-") or label.endswith("-"):
            return False
        if not label_re.match(label):
            return False
    return bool(TLD_RE.match(labels[-1]))


def parse_hosts(text: str) -> list[str]:
    """Split a host list on newlines/commas, dropping comments and duplicates."""
    seen = set()
    out = []
    for raw in HOST_SPLIT_RE.split(text):
        value = raw.strip().lower()
        if not value or value.startswith("#"):
            continue
        if value not in seen:
            seen.add(value)
            out.append(value)
    return out


@lru_cache(maxsize=1024)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a CNAME glob (``*`` any run, ``?`` one char) into an anchored regex."""
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("^" + "".join(parts) + "$", re.IGNORECASE)


def registrable_domain(host: str) -> str:
    """eTLD+1 for ``host`` (``a.b.example.co.uk`` -> ``example.co.uk``)."""
    value = normalize_domain(host)
    ext = _EXTRACT(value)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return value
