import pytest
from pydantic import ValidationError

from subvet.fingerprints import FingerprintDatabase, builtin_services, load_fingerprint_database
from subvet.fingerprints.signatures import load_signatures_from_dir
from subvet.models.fingerprints import ServiceFingerprint


def _fp(name, cnames, **extra):
    return ServiceFingerprint.model_validate({"service": name, "cnames": cnames, "takeoverPossible": True, **extra})


def test_find_by_cname(database):
    assert database.find_by_cname("my-bucket.s3.amazonaws.com").service == "AWS S3"
    assert database.find_by_cname("my-bucket.s3-us-west-2.amazonaws.com").service == "AWS S3"
    assert database.find_by_cname("USER.GitHub.io.").service == "GitHub Pages"
    assert database.find_by_cname("myapp.herokuapp.com").service == "Heroku"
    assert database.find_by_cname("site.example.org") is None
    assert database.find_by_cname("") is None


def test_first_declared_match_wins():
    db = FingerprintDatabase([_fp("Specific", ["app.cloud.test"]), _fp("Broad", ["*.cloud.test"])])
    assert db.find_by_cname("app.cloud.test").service == "Specific"
    assert db.find_by_cname("other.cloud.test").service == "Broad"


def test_get_by_name_is_case_insensitive(database):
    assert database.get_by_name("aws s3").service == "AWS S3"
    assert database.get_by_name("  GITHUB PAGES ").service == "GitHub Pages"
    assert database.get_by_name("nope") is None


def test_categories_and_aliases(database):
    counts = {c["name"]: c["count"] for c in database.categories()}
    assert sum(counts.values()) == len(database)
    assert counts["cloud"] >= 5
    assert database.by_category("cms") == database.by_category("website-builders")
    assert database.by_category("helpdesk") == database.by_category("support")
    assert all(fp.category == "devtools" for fp in database.by_category("Developer"))


def test_builtins_validate_and_have_unique_names():
    services = builtin_services()
    names = [fp.service.lower() for fp in services]
    assert len(names) == len(set(names))
    assert all(fp.cnames for fp in services)


def test_list_services_shape(database):
    entry = next(s for s in database.list_services() if s["service"] == "AWS S3")
    assert entry["category"] == "cloud"
    assert entry["takeover_possible"] is True
    assert "*.s3.amazonaws.com" in entry["cnames"]


def test_accepts_camel_and_snake_keys():
    camel = _fp("Camel", ["*.camel.test"], minConfidence=6, negativePatterns=[])
    snake = ServiceFingerprint.model_validate(
        {"service": "Snake", "cnames": ["*.snake.test"], "takeover_possible": False, "min_confidence": 6}
    )
    assert camel.min_confidence == snake.min_confidence == 6
    assert _fp("Default", ["*.d.test"]).min_confidence == 3


def test_invalid_rule_type_is_rejected():
    with pytest.raises(ValidationError):
        _fp("Broken", ["*.broken.test"], fingerprints=[{"type": "http_cookie", "pattern": "x"}])
    with pytest.raises(ValidationError):
        _fp("NoCnames", [])


SIGNATURES = """
- service: AWS S3
  cnames: ["*.s3.amazonaws.com"]
  takeoverPossible: false
  fingerprints:
    - type: http_body
      pattern: CustomBucketMissing
      weight: 10
- service: Internal Pages
  cnames: ["*.pages.internal.test"]
  takeoverPossible: true
  minConfidence: 4
  fingerprints:
    - type: http_status
      value: 404
"""


def test_custom_signatures_override_builtins(tmp_path):
    (tmp_path / "custom.yaml").write_text(SIGNATURES, encoding="utf-8")
    (tmp_path / "notes.yml").write_text("just: a mapping\n", encoding="utf-8")
    (tmp_path / "README.txt").write_text("ignored", encoding="utf-8")

    db = load_fingerprint_database(str(tmp_path))

    s3 = db.get_by_name("aws s3")
    assert s3.takeover_possible is False
    assert s3.category == "custom"
    assert db.services[0] is s3
    assert sum(1 for fp in db.services if fp.service == "AWS S3") == 1
    assert db.find_by_cname("docs.pages.internal.test").service == "Internal Pages"
    assert len(db) == len(builtin_services()) + 1


def test_invalid_signature_file_raises(tmp_path):
    (tmp_path / "bad.yaml").write_text("- service: Broken\n  cnames: []\n  takeoverPossible: true\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_signatures_from_dir(str(tmp_path))


def test_missing_signature_dir_yields_builtins(tmp_path):
    assert load_signatures_from_dir(str(tmp_path / "absent")) == []
    assert load_signatures_from_dir(None) == []
    assert len(load_fingerprint_database(str(tmp_path / "absent"))) == len(builtin_services())
