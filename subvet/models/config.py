from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_CONCURRENCY = 10


class ScanOptions(BaseModel):
    timeout: int = Field(DEFAULT_TIMEOUT_MS, gt=0, description="Per-query deadline in milliseconds")
    concurrency: int = Field(DEFAULT_CONCURRENCY, gt=0, description="Hosts scanned per batch")
    http_probe: bool = True
    ns_check: bool = False
    mx_check: bool = False
    spf_check: bool = False
    srv_check: bool = False
    txt_check: bool = False
    verbose: bool = False
    follow_redirects: bool = True
    max_body_bytes: int = Field(100 * 1024, gt=0)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0
