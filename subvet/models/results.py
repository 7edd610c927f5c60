from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import ScanOptions

RecordType = Literal["A", "AAAA", "CNAME", "NS", "MX", "TXT", "SRV"]


class TakeoverStatus(str, Enum):
    unknown = "unknown"
    not_vulnerable = "not_vulnerable"
    potential = "potential"
    likely = "likely"
    vulnerable = "vulnerable"


class RiskLevel(str, Enum):
    info = "info"
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


STATUS_RANK = {
    TakeoverStatus.unknown: 0,
    TakeoverStatus.not_vulnerable: 0,
    TakeoverStatus.potential: 1,
    TakeoverStatus.likely: 2,
    TakeoverStatus.vulnerable: 3,
}
RISK_RANK = {level: i for i, level in enumerate(RiskLevel)}


class DnsRecord(BaseModel):
    type: RecordType
    value: str


class DnsEvidence(BaseModel):
    host: str
    records: list[DnsRecord] = Field(default_factory=list)
    cname: Optional[str] = None
    has_ipv4: bool = False
    has_ipv6: bool = False
    resolved: bool = False
    nxdomain: bool = False
    error: Optional[str] = None
    ns_records: list[str] = Field(default_factory=list)
    ns_dangling: list[str] = Field(default_factory=list)
    mx_records: list[str] = Field(default_factory=list)
    mx_dangling: list[str] = Field(default_factory=list)
    spf_record: Optional[str] = None
    spf_includes: list[str] = Field(default_factory=list)
    spf_dangling: list[str] = Field(default_factory=list)
    srv_records: list[str] = Field(default_factory=list)
    srv_dangling: list[str] = Field(default_factory=list)
    txt_references: list[str] = Field(default_factory=list)
    txt_dangling: list[str] = Field(default_factory=list)

    def values(self, *record_types: str) -> list[str]:
        return [r.value for r in self.records if r.type in record_types]

    @property
    def has_cname_record(self) -> bool:
        return any(r.type == "CNAME" for r in self.records)


class WildcardProbeResult(BaseModel):
    is_wildcard: bool = False
    wildcard_ips: list[str] = Field(default_factory=list)

    @property
    def wildcard_ip(self) -> Optional[str]:
        return self.wildcard_ips[0] if self.wildcard_ips else None


class HttpProbeResult(BaseModel):
    url: str
    status: Optional[int] = None
    body: Optional[str] = None
    headers: dict[str, str] = Field(default_factory=dict)
    error: Optional[str] = None
    response_time: Optional[int] = None


class ScanResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    status: TakeoverStatus = TakeoverStatus.unknown
    risk: RiskLevel = RiskLevel.info
    service: Optional[str] = None
    cname: Optional[str] = None
    evidence: tuple[str, ...] = ()
    confidence: Optional[int] = None
    dns: DnsEvidence
    http: Optional[HttpProbeResult] = None
    poc: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def with_evidence(self, *notes: str, **updates) -> "ScanResult":
        return self.model_copy(update={"evidence": self.evidence + tuple(notes), **updates})

    def classify(self, status: TakeoverStatus, risk: RiskLevel, *notes: str, **updates) -> "ScanResult":
        return self.with_evidence(*notes, status=status, risk=risk, **updates)


class ScanSummary(BaseModel):
    total: int = 0
    vulnerable: int = 0
    likely: int = 0
    potential: int = 0
    safe: int = 0
    errors: int = 0


class ScanOutput(BaseModel):
    version: str
    timestamp: datetime
    target: str
    options: ScanOptions
    summary: ScanSummary
    results: list[ScanResult]
