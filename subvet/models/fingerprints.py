from __future__ import annotations

import re
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HTTP_RULE_TYPES = frozenset({"http_body", "http_status", "http_header"})
DNS_RULE_TYPES = frozenset(
    {
        "dns_nxdomain",
        "dns_cname",
        "ns_nxdomain",
        "mx_nxdomain",
        "spf_include_nxdomain",
        "srv_nxdomain",
        "txt_ref_nxdomain",
    }
)
DEFAULT_RULE_WEIGHT = 5
CONFIDENCE_DEFAULT_MIN = 3


class _Rule(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class _PatternMixin:
    def matches(self, text: str) -> bool:
        if self.regex:
            return re.search(self.pattern, text, re.IGNORECASE) is not None
        return self.pattern.lower() in text.lower()


class HttpBodyRule(_PatternMixin, _Rule):
    type: Literal["http_body"]
    pattern: str
    regex: bool = False
    weight: int = Field(DEFAULT_RULE_WEIGHT, ge=0, le=10)
    required: bool = False


class HttpStatusRule(_Rule):
    type: Literal["http_status"]
    value: int
    weight: int = Field(DEFAULT_RULE_WEIGHT, ge=0, le=10)
    required: bool = False


class HttpHeaderRule(_PatternMixin, _Rule):
    type: Literal["http_header"]
    header: str
    pattern: str
    regex: bool = False
    weight: int = Field(DEFAULT_RULE_WEIGHT, ge=0, le=10)
    required: bool = False


class DnsRule(_Rule):
    """DNS-phase rule; carries no weight and never enters confidence math."""

    type: Literal[
        "dns_nxdomain",
        "dns_cname",
        "ns_nxdomain",
        "mx_nxdomain",
        "spf_include_nxdomain",
        "srv_nxdomain",
        "txt_ref_nxdomain",
    ]
    pattern: Optional[str] = None


HttpRule = Union[HttpBodyRule, HttpStatusRule, HttpHeaderRule]
FingerprintRule = Annotated[Union[HttpBodyRule, HttpStatusRule, HttpHeaderRule, DnsRule], Field(discriminator="type")]


class NegativeBody(_PatternMixin, _Rule):
    type: Literal["http_body"]
    pattern: str
    regex: bool = False
    description: str


class NegativeStatus(_Rule):
    type: Literal["http_status"]
    value: int
    description: str


class NegativeHeader(_PatternMixin, _Rule):
    type: Literal["http_header"]
    header: str
    pattern: str
    regex: bool = False
    description: str


NegativePattern = Annotated[Union[NegativeBody, NegativeStatus, NegativeHeader], Field(discriminator="type")]


class ServiceFingerprint(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    service: str
    description: str = ""
    cnames: tuple[str, ...] = Field(min_length=1)
    fingerprints: tuple[FingerprintRule, ...] = ()
    negative_patterns: tuple[NegativePattern, ...] = ()
    takeover_possible: bool
    min_confidence: int = Field(CONFIDENCE_DEFAULT_MIN, ge=0, le=10)
    documentation: Optional[str] = None
    poc: Optional[str] = None
    category: str = "custom"
