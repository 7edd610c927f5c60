from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..fingerprints import FingerprintDatabase
from ..models.config import ScanOptions
from ..models.results import WildcardProbeResult
from ..modules.decision import DecisionEngine, Prober
from ..modules.dns_evidence import DnsEvidenceCollector
from ..utils.dns import DnsClient


@dataclass
class ScanContext:
    options: ScanOptions
    database: FingerprintDatabase
    dns_client: DnsClient
    prober: Optional[Prober]
    engine: DecisionEngine
    wildcard_cache: dict[str, WildcardProbeResult] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        options: ScanOptions,
        database: FingerprintDatabase,
        dns_client: DnsClient,
        prober: Optional[Prober],
    ) -> "ScanContext":
        collector = DnsEvidenceCollector(dns_client, options)
        engine = DecisionEngine(collector, prober, database, options)
        return cls(options=options, database=database, dns_client=dns_client, prober=prober, engine=engine)
