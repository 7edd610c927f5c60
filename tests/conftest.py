import pytest

from subvet.fingerprints import load_fingerprint_database
from subvet.models.results import HttpProbeResult
from subvet.utils.dns import PermanentDnsFailure, TransientDnsFailure


class FakeDnsClient:
    """Answers from a table keyed by (name, type).

    Values are lists of answers or the strings ``"SERVFAIL"``/``"timeout"``.
    Missing keys answer NXDOMAIN unless the name falls under a wildcard zone.
    """

    def __init__(self):
        self.table = {}
        self.wildcards = {}
        self.calls = []

    def add(self, name, record_type, value):
        self.table[(name.lower().rstrip("."), record_type)] = value
        return self

    def wildcard(self, base, ips):
        self.wildcards[base] = ips
        return self

    async def query(self, name, record_type):
        key = (name.lower().rstrip("."), record_type)
        self.calls.append(key)
        value = self.table.get(key)
        if value is None:
            for base, ips in self.wildcards.items():
                if key[0].endswith("." + base) and record_type == "A":
                    return list(ips)
            raise PermanentDnsFailure(name, record_type, "ENOTFOUND")
        if value in ("SERVFAIL", "timeout"):
            raise TransientDnsFailure(name, record_type, value)
        return list(value)


class FakeProber:
    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    async def probe(self, host):
        self.calls.append(host)
        if host in self.responses:
            return self.responses[host]
        return HttpProbeResult(url=f"https://{host}", error="Connection refused")


@pytest.fixture
def fake_dns():
    return FakeDnsClient()


@pytest.fixture
def fake_prober():
    return FakeProber()


@pytest.fixture(scope="session")
def database():
    return load_fingerprint_database()
