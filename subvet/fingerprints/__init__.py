"""Built-in service fingerprints and the database that matches CNAMEs against them.

Entries are based on the community list at
https://github.com/EdOverflow/can-i-take-over-xyz and grouped by category.
Custom YAML signatures override built-ins that share a service name.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..models.fingerprints import ServiceFingerprint
from ..utils.normalize import glob_to_regex, normalize_domain
from .cloud import CLOUD_FINGERPRINTS
from .devtools import DEVTOOLS_FINGERPRINTS
from .ecommerce import ECOMMERCE_FINGERPRINTS
from .hosting import HOSTING_FINGERPRINTS
from .marketing import MARKETING_FINGERPRINTS
from .misc import MISC_FINGERPRINTS
from .signatures import load_signatures_from_dir
from .support import SUPPORT_FINGERPRINTS
from .website_builders import WEBSITE_BUILDER_FINGERPRINTS

logger = logging.getLogger(__name__)

BUILTIN_FINGERPRINTS = {
    "cloud": CLOUD_FINGERPRINTS,
    "hosting": HOSTING_FINGERPRINTS,
    "website-builders": WEBSITE_BUILDER_FINGERPRINTS,
    "ecommerce": ECOMMERCE_FINGERPRINTS,
    "support": SUPPORT_FINGERPRINTS,
    "marketing": MARKETING_FINGERPRINTS,
    "devtools": DEVTOOLS_FINGERPRINTS,
    "misc": MISC_FINGERPRINTS,
}

CATEGORY_ALIASES = {
    "cms": "website-builders",
    "helpdesk": "support",
    "developer": "devtools",
}


def builtin_services() -> list[ServiceFingerprint]:
    services = []
    for category, entries in BUILTIN_FINGERPRINTS.items():
        for entry in entries:
            services.append(ServiceFingerprint.model_validate({**entry, "category": category}))
    return services


class FingerprintDatabase:
    """Ordered, read-only collection of service fingerprints."""

    def __init__(self, services: Iterable[ServiceFingerprint]) -> None:
        self._services = tuple(services)
        self._by_name = {}
        for fp in self._services:
            self._by_name.setdefault(fp.service.lower(), fp)

    @property
    def services(self) -> tuple[ServiceFingerprint, ...]:
        return self._services

    def __len__(self) -> int:
        return len(self._services)

    def find_by_cname(self, cname: str) -> Optional[ServiceFingerprint]:
        """First service, in declared order, with a glob matching ``cname``."""
        target = normalize_domain(cname)
        if not target:
            return None
        for fp in self._services:
            for pattern in fp.cnames:
                if glob_to_regex(pattern).match(target):
                    return fp
        return None

    def get_by_name(self, name: str) -> Optional[ServiceFingerprint]:
        return self._by_name.get(name.strip().lower())

    def by_category(self, category: str) -> list[ServiceFingerprint]:
        key = category.strip().lower()
        key = CATEGORY_ALIASES.get(key, key)
        return [fp for fp in self._services if fp.category == key]

    def categories(self) -> list[dict]:
        counts: dict[str, int] = {}
        for fp in self._services:
            counts[fp.category] = counts.get(fp.category, 0) + 1
        return [{"name": name, "count": count} for name, count in counts.items()]

    def list_services(self) -> list[dict]:
        return [
            {
                "service": fp.service,
                "category": fp.category,
                "takeover_possible": fp.takeover_possible,
                "cnames": list(fp.cnames),
            }
            for fp in self._services
        ]


def load_fingerprint_database(custom_dir: Optional[str] = None) -> FingerprintDatabase:
    builtins = builtin_services()
    custom = load_signatures_from_dir(custom_dir)
    if not custom:
        return FingerprintDatabase(builtins)

    seen = {fp.service.lower() for fp in custom}
    merged = list(custom) + [fp for fp in builtins if fp.service.lower() not in seen]
    logger.info(
        "custom signatures merged",
        extra={"custom": len(custom), "total": len(merged)},
    )
    return FingerprintDatabase(merged)
