import asyncio

from subvet.models.config import ScanOptions
from subvet.modules.dns_evidence import CNAME_CHAIN_MAX_DEPTH, DnsEvidenceCollector


def _resolve(fake_dns, host, **options):
    collector = DnsEvidenceCollector(fake_dns, ScanOptions(**options))
    return asyncio.run(collector.resolve(host))


def test_plain_address_host(fake_dns):
    fake_dns.add("www.example.com", "A", ["1.2.3.4"]).add("www.example.com", "AAAA", ["2001:db8::1"])
    dns = _resolve(fake_dns, "www.example.com")
    assert dns.resolved and dns.has_ipv4 and dns.has_ipv6
    assert not dns.nxdomain
    assert dns.cname is None
    assert dns.values("A", "AAAA") == ["1.2.3.4", "2001:db8::1"]
    assert dns.error is None


def test_host_without_records_is_nxdomain(fake_dns):
    dns = _resolve(fake_dns, "gone.example.com")
    assert dns.nxdomain
    assert not dns.resolved
    assert dns.error is None


def test_servfail_host_is_not_nxdomain(fake_dns):
    fake_dns.add("flaky.example.com", "A", "SERVFAIL").add("flaky.example.com", "AAAA", "SERVFAIL")
    dns = _resolve(fake_dns, "flaky.example.com")
    assert not dns.nxdomain
    assert dns.error == "DNS server failure"


def test_cname_chain_to_missing_target(fake_dns):
    fake_dns.add("a.example.com", "CNAME", ["b.example.net."])
    fake_dns.add("b.example.net", "CNAME", ["c.example.org."])
    dns = _resolve(fake_dns, "a.example.com")
    assert dns.values("CNAME") == ["b.example.net", "c.example.org"]
    assert dns.cname == "c.example.org"
    assert dns.resolved
    assert dns.nxdomain


def test_cname_target_servfail_is_not_nxdomain(fake_dns):
    fake_dns.add("app.example.com", "CNAME", ["app.saas-provider.com."])
    fake_dns.add("app.saas-provider.com", "A", "SERVFAIL").add("app.saas-provider.com", "AAAA", "timeout")
    dns = _resolve(fake_dns, "app.example.com")
    assert dns.cname == "app.saas-provider.com"
    assert not dns.nxdomain
    assert dns.error in ("DNS server failure", "DNS timeout")


def test_cname_query_servfail_sets_error(fake_dns):
    fake_dns.add("odd.example.com", "CNAME", "SERVFAIL")
    dns = _resolve(fake_dns, "odd.example.com")
    assert dns.cname is None
    assert not dns.nxdomain
    assert dns.error == "DNS server failure"


def test_cname_chain_is_bounded(fake_dns):
    for i in range(20):
        fake_dns.add(f"h{i}.example.com", "CNAME", [f"h{i + 1}.example.com."])
    dns = _resolve(fake_dns, "h0.example.com")
    assert len(dns.values("CNAME")) == CNAME_CHAIN_MAX_DEPTH + 1


def test_cname_cycle_terminates(fake_dns):
    fake_dns.add("loop.example.com", "CNAME", ["back.example.com."])
    fake_dns.add("back.example.com", "CNAME", ["loop.example.com."])
    dns = _resolve(fake_dns, "loop.example.com")
    assert dns.values("CNAME") == ["back.example.com", "loop.example.com"]


def test_trailing_dot_and_case_do_not_change_evidence(fake_dns):
    fake_dns.add("sub.example.com", "CNAME", ["target.example.net."])
    fake_dns.add("target.example.net", "A", ["9.9.9.9"])
    first = _resolve(fake_dns, "Sub.Example.com.")
    second = _resolve(fake_dns, "sub.example.com")
    assert first.model_dump() == second.model_dump()
    assert first.host == "sub.example.com"


def test_ns_dangling_only_for_permanent_failures(fake_dns):
    fake_dns.add("zone.example.com", "A", ["1.2.3.4"])
    fake_dns.add("zone.example.com", "NS", ["ns1.defunct.com.", "ns2.live.com.", "ns3.flaky.com."])
    fake_dns.add("ns2.live.com", "A", ["5.5.5.5"])
    fake_dns.add("ns3.flaky.com", "A", "SERVFAIL")
    dns = _resolve(fake_dns, "zone.example.com", ns_check=True)
    assert dns.ns_records == ["ns1.defunct.com", "ns2.live.com", "ns3.flaky.com"]
    assert dns.ns_dangling == ["ns1.defunct.com"]
    assert dns.values("NS") == dns.ns_records


def test_mx_skips_null_mx(fake_dns):
    fake_dns.add("mail.example.com", "A", ["1.2.3.4"])
    fake_dns.add("mail.example.com", "MX", ["10 mx.gone.com.", "20 mx.live.com.", "0 ."])
    fake_dns.add("mx.live.com", "AAAA", ["2001:db8::25"])
    dns = _resolve(fake_dns, "mail.example.com", mx_check=True)
    assert dns.mx_records == ["mx.gone.com", "mx.live.com"]
    assert dns.mx_dangling == ["mx.gone.com"]
    assert dns.values("MX") == ["10 mx.gone.com", "20 mx.live.com"]


def test_spf_include_dangling(fake_dns):
    fake_dns.add("example.com", "A", ["1.2.3.4"])
    fake_dns.add(
        "example.com",
        "TXT",
        ["v=spf1 include:_spf.gone.com include:_spf.ok.com include:_spf.flaky.com -all"],
    )
    fake_dns.add("_spf.ok.com", "TXT", ["v=spf1 ip4:1.2.3.0/24 -all"])
    fake_dns.add("_spf.flaky.com", "TXT", "timeout")
    dns = _resolve(fake_dns, "example.com", spf_check=True)
    assert dns.spf_includes == ["_spf.gone.com", "_spf.ok.com", "_spf.flaky.com"]
    assert dns.spf_dangling == ["_spf.gone.com"]
    assert dns.spf_record.startswith("v=spf1")
    assert dns.values("TXT") == [dns.spf_record]


def test_srv_records_and_dangling_labels(fake_dns):
    fake_dns.add("example.com", "A", ["1.2.3.4"])
    fake_dns.add("_sip._tcp.example.com", "SRV", ["10 5 5060 sip.gone.com."])
    fake_dns.add("_caldav._tcp.example.com", "SRV", ["0 0 0 ."])
    fake_dns.add("_xmpp-client._tcp.example.com", "SRV", ["5 0 5222 xmpp.live.com."])
    fake_dns.add("xmpp.live.com", "A", ["7.7.7.7"])
    dns = _resolve(fake_dns, "example.com", srv_check=True)
    assert dns.srv_records == ["_sip._tcp: sip.gone.com", "_xmpp-client._tcp: xmpp.live.com", "_caldav._tcp: ."]
    assert dns.srv_dangling == ["_sip._tcp: sip.gone.com"]
    assert "_sip._tcp 10 5 5060 sip.gone.com" in dns.values("SRV")


def test_txt_references_include_dmarc_and_skip_tokens(fake_dns):
    fake_dns.add("example.com", "A", ["1.2.3.4"])
    fake_dns.add(
        "example.com",
        "TXT",
        ["google-site-verification=abc", "v=spf1 a:web.gone.com redirect=_spf.ok.com mx:example.com -all"],
    )
    fake_dns.add("_dmarc.example.com", "TXT", ["v=DMARC1; p=none; rua=mailto:d@reports.gone.net"])
    fake_dns.add("_spf.ok.com", "TXT", ["v=spf1 -all"])
    dns = _resolve(fake_dns, "example.com", txt_check=True)
    assert dns.txt_references == ["web.gone.com", "_spf.ok.com", "reports.gone.net"]
    assert dns.txt_dangling == ["web.gone.com", "reports.gone.net"]


def test_checks_are_skipped_unless_enabled(fake_dns):
    fake_dns.add("zone.example.com", "A", ["1.2.3.4"])
    fake_dns.add("zone.example.com", "NS", ["ns1.defunct.com."])
    dns = _resolve(fake_dns, "zone.example.com")
    assert dns.ns_records == []
    assert ("zone.example.com", "NS") not in fake_dns.calls


def test_cname_timeout_with_missing_addresses_is_not_nxdomain(fake_dns):
    fake_dns.add("slow.example.com", "CNAME", "timeout")
    dns = _resolve(fake_dns, "slow.example.com")
    assert not dns.nxdomain
    assert dns.error == "DNS timeout"
