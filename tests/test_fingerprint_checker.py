from subvet.models.fingerprints import ServiceFingerprint
from subvet.models.results import DnsEvidence, HttpProbeResult
from subvet.modules.fingerprint_checker import (
    check_dns_fingerprints,
    check_fingerprints,
    check_generic_patterns,
    check_stale_cname,
    confidence_score,
)


def _service(**overrides):
    data = {
        "service": "Example Cloud",
        "cnames": ["*.example-cloud.net"],
        "takeoverPossible": True,
        "fingerprints": [],
    }
    data.update(overrides)
    return ServiceFingerprint.model_validate(data)


def _http(status=404, body="", headers=None):
    return HttpProbeResult(url="https://sub.example.com", status=status, body=body, headers=headers or {})


def test_confidence_score_rounds_half_up():
    assert confidence_score(0, 0) == 0
    assert confidence_score(0, 10) == 0
    assert confidence_score(1, 4) == 3  # 2.5
    assert confidence_score(12, 15) == 8
    assert confidence_score(2, 12) == 2
    assert confidence_score(15, 15) == 10


def test_dns_rules_do_not_dilute_http_confidence():
    service = _service(
        fingerprints=[
            {"type": "http_body", "pattern": "no such site", "weight": 5},
            {"type": "dns_nxdomain"},
        ]
    )
    check = check_fingerprints(service, _http(body="Error: No Such Site here"))
    assert check.confidence == 10
    assert check.matches == ['HTTP body matches: "no such site"']


def test_required_rule_missing():
    service = _service(
        fingerprints=[
            {"type": "http_body", "pattern": "There isn't a GitHub Pages site here", "weight": 10, "required": True},
            {"type": "http_status", "value": 404, "weight": 2},
        ]
    )
    check = check_fingerprints(service, _http(body="plain 404"))
    assert not check.required_met
    assert check.matches == ["HTTP status: 404"]
    assert check.confidence == 2


def test_header_and_regex_rules():
    service = _service(
        fingerprints=[
            {"type": "http_header", "header": "Server", "pattern": "^cloud-edge/\\d+", "regex": True, "weight": 4},
            {"type": "http_body", "pattern": "app .* not found", "regex": True, "weight": 6},
        ]
    )
    check = check_fingerprints(service, _http(body="App foo not found", headers={"server": "cloud-edge/2"}))
    assert check.confidence == 10
    assert 'HTTP header Server matches: "^cloud-edge/\\d+"' in check.matches


def test_negative_pattern_is_reported():
    service = _service(
        fingerprints=[{"type": "http_status", "value": 403, "weight": 2}],
        negativePatterns=[{"type": "http_body", "pattern": "AccessDenied", "description": "Bucket exists"}],
    )
    check = check_fingerprints(service, _http(status=403, body="<Code>AccessDenied</Code>"))
    assert check.negative_match
    assert "Safe: Bucket exists" in check.matches


def test_dns_fingerprints():
    service = _service(
        fingerprints=[
            {"type": "dns_nxdomain"},
            {"type": "dns_cname", "pattern": "example-cloud"},
            {"type": "ns_nxdomain"},
            {"type": "srv_nxdomain"},
        ]
    )
    dns = DnsEvidence(host="sub.example.com", nxdomain=True, ns_dangling=["ns1.gone.com"], srv_dangling=[])
    assert check_dns_fingerprints(service, dns, "app.Example-Cloud.net") == [
        "DNS: CNAME target returns NXDOMAIN",
        'DNS: CNAME matches pattern "example-cloud"',
        "DNS: Dangling NS delegation (ns1.gone.com)",
    ]


def test_generic_patterns():
    assert check_generic_patterns("<Code>NoSuchBucket</Code>", 404) == ["Strong indicator: AWS S3 NoSuchBucket"]
    assert check_generic_patterns("Site not found", 404) == ["Indicator: Site not found (status 404)"]
    assert check_generic_patterns("Site not found", 200) == []
    # safe wording suppresses everything
    assert check_generic_patterns("NoSuchBucket - site under maintenance", 404) == []


def test_stale_cname_login_redirect_wins():
    http = _http(status=302, body="", headers={"location": "https://app-ab01.marketo.com/login"})
    assert check_stale_cname("mkto.example.mktoweb.com", http) == [
        "Stale CNAME: Redirects to Marketo login/default page"
    ]


def test_stale_cname_default_page():
    http = _http(status=200, body="<title>Help Center Closed</title>")
    assert check_stale_cname("help.zendesk.com", http) == ["Stale CNAME: Zendesk default/error page detected"]


def test_stale_cname_thin_error_on_saas_suffix():
    assert check_stale_cname("x.firebaseapp.com", _http(status=404, body="Not Found")) == [
        "Stale CNAME: x.firebaseapp.com returns 404 with minimal content"
    ]
    assert check_stale_cname("x.firebaseapp.com", _http(status=404, body="x" * 5000)) == []
    assert check_stale_cname("x.example.org", _http(status=404, body="Not Found")) == []


def test_stale_cname_redirect_to_root():
    http = _http(status=301, body="Moved", headers={"location": "https://www.netlify.com/"})
    assert check_stale_cname("site.netlify.app", http) == [
        "Stale CNAME: site.netlify.app redirects to SaaS root/login (301)"
    ]


def test_stale_cname_requires_cname():
    assert check_stale_cname(None, _http(body="Help Center Closed")) == []
