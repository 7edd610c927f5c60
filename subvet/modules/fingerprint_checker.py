from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field

from ..models.fingerprints import HTTP_RULE_TYPES, ServiceFingerprint
from ..models.results import DnsEvidence, HttpProbeResult

STALE_CNAME_MAX_BODY_LENGTH = 2000


class FingerprintCheck(BaseModel):
    matches: list[str] = Field(default_factory=list)
    confidence: int = 0
    required_met: bool = True
    negative_match: bool = False


def confidence_score(matched_weight: int, total_weight: int) -> int:
    """0-10 score, rounded half up. Zero when nothing is weighted."""
    if total_weight <= 0:
        return 0
    return (20 * matched_weight + total_weight) // (2 * total_weight)


def _header(http: HttpProbeResult, name: str) -> Optional[str]:
    return http.headers.get(name.lower())


def check_fingerprints(service: ServiceFingerprint, http: HttpProbeResult) -> FingerprintCheck:
    """Score the HTTP rules of ``service`` against one probe result.

    DNS rules are skipped entirely: they add nothing to the matched or total
    weight. Negative patterns contribute ``"Safe: ..."`` notes.
    """
    matches: list[str] = []
    total_weight = 0
    matched_weight = 0
    required_met = True

    for rule in service.fingerprints:
        if rule.type not in HTTP_RULE_TYPES:
            continue
        weight = rule.weight
        total_weight += weight
        matched = False

        if rule.type == "http_body":
            if http.body and rule.matches(http.body):
                matches.append(f'HTTP body matches: "{rule.pattern}"')
                matched = True
        elif rule.type == "http_status":
            if http.status == rule.value:
                matches.append(f"HTTP status: {rule.value}")
                matched = True
        elif rule.type == "http_header":
            value = _header(http, rule.header)
            if value and rule.matches(value):
                matches.append(f'HTTP header {rule.header} matches: "{rule.pattern}"')
                matched = True

        if matched:
            matched_weight += weight
        elif rule.required:
            required_met = False

    negative_match = False
    for neg in service.negative_patterns:
        if neg.type == "http_body":
            hit = bool(http.body) and neg.matches(http.body)
        elif neg.type == "http_status":
            hit = http.status == neg.value
        else:
            value = _header(http, neg.header)
            hit = bool(value) and neg.matches(value)
        if hit:
            matches.append(f"Safe: {neg.description}")
            negative_match = True

    return FingerprintCheck(
        matches=matches,
        confidence=confidence_score(matched_weight, total_weight),
        required_met=required_met,
        negative_match=negative_match,
    )


def check_dns_fingerprints(service: ServiceFingerprint, dns: DnsEvidence, cname: Optional[str]) -> list[str]:
    matches: list[str] = []
    for rule in service.fingerprints:
        if rule.type == "dns_nxdomain":
            if dns.nxdomain:
                matches.append("DNS: CNAME target returns NXDOMAIN")
        elif rule.type == "dns_cname":
            if cname and rule.pattern and rule.pattern.lower() in cname.lower():
                matches.append(f'DNS: CNAME matches pattern "{rule.pattern}"')
        elif rule.type == "ns_nxdomain":
            if dns.ns_dangling:
                matches.append(f"DNS: Dangling NS delegation ({', '.join(dns.ns_dangling)})")
        elif rule.type == "mx_nxdomain":
            if dns.mx_dangling:
                matches.append(f"DNS: Dangling MX record ({', '.join(dns.mx_dangling)})")
        elif rule.type == "spf_include_nxdomain":
            if dns.spf_dangling:
                matches.append(f"DNS: Dangling SPF include ({', '.join(dns.spf_dangling)})")
        elif rule.type == "srv_nxdomain":
            if dns.srv_dangling:
                matches.append(f"DNS: Dangling SRV record ({', '.join(dns.srv_dangling)})")
        elif rule.type == "txt_ref_nxdomain":
            if dns.txt_dangling:
                matches.append(f"DNS: Dangling TXT domain reference ({', '.join(dns.txt_dangling)})")
    return matches


STRONG_INDICATORS = [
    (re.compile(r"NoSuchBucket", re.I), "AWS S3 NoSuchBucket"),
    (re.compile(r"bucket.*does.*not.*exist", re.I), "Bucket does not exist"),
    (re.compile(r"domain.*not.*configured", re.I), "Domain not configured"),
    (re.compile(r"no.*such.*app", re.I), "No such app"),
    (re.compile(r"This.*subdomain.*is.*currently.*available", re.I), "Subdomain available"),
    (re.compile(r"unclaimed", re.I), "Unclaimed resource"),
    (re.compile(r"DEPLOYMENT_NOT_FOUND", re.I), "Deployment not found"),
]

# (pattern, label, statuses the indicator needs)
WEAK_INDICATORS = [
    (re.compile(r"site.*not.*found", re.I), "Site not found", (404, 410)),
    (re.compile(r"project.*not.*found", re.I), "Project not found", (404,)),
    (re.compile(r"repository.*not.*found", re.I), "Repository not found", (404,)),
    (re.compile(r"page.*does.*not.*exist", re.I), "Page does not exist", (404, 410)),
    (re.compile(r"there.*is.*nothing.*here", re.I), "Nothing here message", (404,)),
]

SAFE_PATTERNS = [
    re.compile(r"maintenance", re.I),
    re.compile(r"coming.*soon", re.I),
    re.compile(r"under.*construction", re.I),
    re.compile(r"please.*log.*in", re.I),
    re.compile(r"sign.*in.*required", re.I),
    re.compile(r"authentication.*required", re.I),
]


def check_generic_patterns(body: str, status: Optional[int]) -> list[str]:
    """Service-agnostic takeover hints for hosts with no known fingerprint."""
    if any(p.search(body) for p in SAFE_PATTERNS):
        return []
    found = [f"Strong indicator: {label}" for pattern, label in STRONG_INDICATORS if pattern.search(body)]
    for pattern, label, statuses in WEAK_INDICATORS:
        if status is not None and status in statuses and pattern.search(body):
            found.append(f"Indicator: {label} (status {status})")
    return found


SAAS_LOGIN_REDIRECTS = [
    (re.compile(r"marketo\.com", re.I), "Marketo"),
    (re.compile(r"salesforce\.com", re.I), "Salesforce"),
    (re.compile(r"pardot\.com", re.I), "Pardot"),
    (re.compile(r"hubspot\.com", re.I), "HubSpot"),
    (re.compile(r"zendesk\.com/auth", re.I), "Zendesk"),
    (re.compile(r"freshdesk\.com/login", re.I), "Freshdesk"),
    (re.compile(r"intercom\.com", re.I), "Intercom"),
    (re.compile(r"mailchimp\.com", re.I), "Mailchimp"),
    (re.compile(r"sendgrid\.(com|net)", re.I), "SendGrid"),
]

SAAS_DEFAULT_PAGES = [
    (re.compile(r"Login \| Marketo", re.I), "Marketo"),
    (re.compile(r"Pardot\s*·?\s*Login", re.I), "Pardot"),
    (re.compile(r"There isn't a .* page here", re.I), "HubSpot"),
    (re.compile(r"Domain not found.*hubspot", re.I), "HubSpot"),
    (re.compile(r"This UserVoice subdomain is currently available", re.I), "UserVoice"),
    (re.compile(r"Help Center Closed", re.I), "Zendesk"),
    (re.compile(r"project not found", re.I), "Unknown SaaS"),
    (re.compile(r"This page is reserved for", re.I), "Unknown SaaS"),
    (re.compile(r"is not a registered namespace", re.I), "Unknown SaaS"),
]

SAAS_CNAME_SUFFIXES = (
    ".cloudfront.net",
    ".herokuapp.com",
    ".azurewebsites.net",
    ".trafficmanager.net",
    ".cloudapp.azure.com",
    ".ghost.io",
    ".wordpress.com",
    ".shopify.com",
    ".myshopify.com",
    ".squarespace.com",
    ".webflow.io",
    ".netlify.app",
    ".vercel.app",
    ".firebaseapp.com",
    ".zendesk.com",
    ".freshdesk.com",
    ".intercom.io",
    ".statuspage.io",
    ".mktoedge.com",
    ".mktoweb.com",
    ".pardot.com",
    ".hubspot.net",
    ".hs-sites.com",
    ".sendgrid.net",
)

ROOT_URL_RE = re.compile(r"^https?://[^/]+/?$", re.I)
LOGIN_PATH_RE = re.compile(r"login|signin|auth", re.I)


def check_stale_cname(cname: Optional[str], http: HttpProbeResult) -> list[str]:
    """Hints that a CNAME points at a SaaS account that is no longer configured.

    Checked in order, first hit wins for the first two: a redirect to a SaaS
    login page, then a SaaS default/error page. Otherwise a CNAME into a known
    SaaS zone answering with a thin 404/403/410 or a redirect to a bare root
    or login path.
    """
    if not cname:
        return []

    location = _header(http, "location") or ""
    for pattern, name in SAAS_LOGIN_REDIRECTS:
        if pattern.search(location):
            return [f"Stale CNAME: Redirects to {name} login/default page"]

    if not http.body:
        return []

    for pattern, name in SAAS_DEFAULT_PAGES:
        if pattern.search(http.body):
            return [f"Stale CNAME: {name} default/error page detected"]

    found: list[str] = []
    if not cname.lower().endswith(SAAS_CNAME_SUFFIXES) or http.status is None:
        return found
    if http.status in (404, 403, 410) and len(http.body) < STALE_CNAME_MAX_BODY_LENGTH:
        found.append(f"Stale CNAME: {cname} returns {http.status} with minimal content")
    if http.status in (301, 302) and location:
        if ROOT_URL_RE.match(location) or LOGIN_PATH_RE.search(location):
            found.append(f"Stale CNAME: {cname} redirects to SaaS root/login ({http.status})")
    return found
