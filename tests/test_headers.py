import requests

from tvkit.constants import APP_KEY
from tvkit.headers import apply_identity_headers, identity_headers


def test_sets_identity_headers_on_request():
    req = requests.Request("GET", "http://example.com")

    apply_identity_headers(req, "test-device", "test-crm", "test-unique")

    assert req.headers["deviceId"] == "test-device"
    assert req.headers["crmid"] == "test-crm"
    assert req.headers["uniqueId"] == "test-unique"
    assert req.headers["appkey"] == "NzNiMDhlYzQyNjJm"
    assert req.headers["userId"] == "test-crm"
    assert req.headers["os"] == "android"


def test_overwrites_prior_values_and_keeps_others():
    req = requests.Request("GET", "http://example.com", headers={"appkey": "stale", "X-Keep": "1"})
    apply_identity_headers(req, "d", "c", "u")
    assert req.headers["appkey"] == APP_KEY
    assert req.headers["X-Keep"] == "1"


def test_idempotent():
    req = requests.Request("GET", "http://example.com")
    apply_identity_headers(req, "d", "c", "u")
    first = dict(req.headers)
    apply_identity_headers(req, "d", "c", "u")
    assert dict(req.headers) == first


def test_prepared_request_is_case_insensitive():
    prep = requests.Request("GET", "http://example.com").prepare()
    apply_identity_headers(prep, "d", "c", "u")
    assert prep.headers["DEVICEID"] == "d"


def test_session_headers():
    session = requests.Session()
    apply_identity_headers(session, "d", "c", "u")
    assert session.headers["uniqueId"] == "u"


def test_identity_headers_dict_passthrough():
    hdrs = identity_headers("  odd id ", "", "u")
    assert hdrs["deviceId"] == "  odd id "
    assert hdrs["crmid"] == ""


def test_identity_headers_carry_no_content_type():
    assert not any(k.lower() == "content-type" for k in identity_headers("d", "c", "u"))


def test_bare_request_gets_form_content_type():
    req = requests.Request("POST", "http://example.com")
    apply_identity_headers(req, "d", "c", "u")
    assert req.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_existing_content_type_is_kept():
    req = requests.Request("POST", "http://example.com", headers={"content-type": "application/json"})
    apply_identity_headers(req, "d", "c", "u")
    values = [v for k, v in req.headers.items() if k.lower() == "content-type"]
    assert values == ["application/json"]
