import asyncio

from subvet.models.results import DnsEvidence, DnsRecord, RiskLevel, ScanResult, TakeoverStatus, WildcardProbeResult
from subvet.modules.wildcard import (
    PROBE_LABEL_PREFIX,
    apply_wildcard_adjustment,
    check_wildcard,
    probe_name,
)
from subvet.utils.dns import PermanentDnsFailure

WILDCARD = WildcardProbeResult(is_wildcard=True, wildcard_ips=["1.2.3.4"])


class RotatingDns:
    def __init__(self, shared=None):
        self.count = 0
        self.shared = shared

    async def query(self, name, record_type):
        if record_type != "A":
            raise PermanentDnsFailure(name, record_type, "ENODATA")
        self.count += 1
        ips = [f"10.0.0.{self.count}"]
        if self.shared:
            ips.append(self.shared)
        return ips


def test_probe_names_are_random_labels():
    first = probe_name("example.com")
    assert first.startswith(PROBE_LABEL_PREFIX)
    assert first.endswith(".example.com")
    assert first != probe_name("example.com")


def test_wildcard_detected_when_every_probe_resolves(fake_dns):
    fake_dns.wildcard("example.com", ["1.2.3.4"])
    probe = asyncio.run(check_wildcard("example.com", fake_dns))
    assert probe.is_wildcard
    assert probe.wildcard_ips == ["1.2.3.4"]
    assert probe.wildcard_ip == "1.2.3.4"


def test_rotating_ips_without_a_shared_one_are_not_a_wildcard():
    probe = asyncio.run(check_wildcard("example.com", RotatingDns()))
    assert not probe.is_wildcard
    assert probe.wildcard_ips == []


def test_wildcard_reports_only_the_shared_ips():
    probe = asyncio.run(check_wildcard("example.com", RotatingDns(shared="192.0.2.10")))
    assert probe.is_wildcard
    assert probe.wildcard_ips == ["192.0.2.10"]


def test_no_wildcard_when_probes_fail(fake_dns):
    probe = asyncio.run(check_wildcard("example.com", fake_dns))
    assert not probe.is_wildcard
    assert probe.wildcard_ips == []


def test_broken_client_never_raises():
    probe = asyncio.run(check_wildcard("example.com", object(), verbose=True))
    assert probe == WildcardProbeResult()


def _result(records, status=TakeoverStatus.not_vulnerable, risk=RiskLevel.info, **fields):
    dns = DnsEvidence(host="sub.example.com", records=[DnsRecord(type=t, value=v) for t, v in records], resolved=True, **fields)
    return ScanResult(host="sub.example.com", dns=dns, status=status, risk=risk)


def test_not_wildcard_leaves_result_untouched():
    result = _result([("A", "1.2.3.4")])
    assert apply_wildcard_adjustment(result, WildcardProbeResult()) is result


def test_all_ips_match_is_safe():
    result = apply_wildcard_adjustment(_result([("A", "1.2.3.4")], TakeoverStatus.potential, RiskLevel.medium), WILDCARD)
    assert result.status == TakeoverStatus.not_vulnerable
    assert result.risk == RiskLevel.info
    assert result.evidence == ("Wildcard DNS detected", "All IPs match wildcard set [1.2.3.4]")


def test_partial_match_reduces_confidence():
    base = _result([("A", "1.2.3.4"), ("A", "5.6.7.8")], TakeoverStatus.likely, RiskLevel.high)
    base = base.with_evidence("Confidence: 5/10", confidence=5)
    result = apply_wildcard_adjustment(base, WILDCARD)
    assert result.confidence == 3
    assert "Confidence: 3/10" in result.evidence
    assert "Partial wildcard IP match (1/2): confidence reduced" in result.evidence
    assert result.status == TakeoverStatus.likely


def test_confidence_floor_is_zero():
    base = _result([("A", "1.2.3.4"), ("A", "5.6.7.8")]).with_evidence("Confidence: 1/10", confidence=1)
    result = apply_wildcard_adjustment(base, WILDCARD)
    assert result.confidence == 0
    assert "Confidence: 0/10" in result.evidence


def test_no_match_without_cname_steps_risk_down():
    result = apply_wildcard_adjustment(_result([("A", "9.9.9.9")], TakeoverStatus.vulnerable, RiskLevel.critical), WILDCARD)
    assert result.status == TakeoverStatus.likely
    assert result.risk == RiskLevel.high
    assert "No CNAME in wildcard domain: confidence reduced" in result.evidence

    medium = apply_wildcard_adjustment(_result([("A", "9.9.9.9")], TakeoverStatus.potential, RiskLevel.medium), WILDCARD)
    assert medium.status == TakeoverStatus.potential
    assert medium.risk == RiskLevel.low


def test_cname_results_only_note_the_wildcard():
    base = _result([("CNAME", "target.example.net"), ("A", "1.2.3.4")], TakeoverStatus.likely, RiskLevel.high)
    result = apply_wildcard_adjustment(base, WILDCARD)
    assert result.status == TakeoverStatus.likely
    assert result.evidence == ("Wildcard DNS detected",)


def test_dangling_records_skip_adjustment():
    base = _result([("A", "1.2.3.4")], TakeoverStatus.vulnerable, RiskLevel.critical, mx_dangling=["mx.gone.com"])
    result = apply_wildcard_adjustment(base, WILDCARD)
    assert result.status == TakeoverStatus.vulnerable
    assert result.evidence[-1] == "Wildcard adjustment skipped: DNS dangling vulnerability confirmed"
