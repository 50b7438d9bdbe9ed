import json

import pytest

from gatewaycheck.core.errors import SuiteError
from gatewaycheck.parsers.suite import Suite, join_url, select
from gatewaycheck.suites.default import GATEWAY_BASE, default_suite


def write(tmp_path, payload):
    p = tmp_path / "suite.json"
    p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return str(p)


def test_join_url():
    assert join_url("http://h/tymg/", "/weapons") == "http://h/tymg/weapons"
    assert join_url("http://h/tymg", "weapons") == "http://h/tymg/weapons"
    assert join_url("http://h/tymg", "") == "http://h/tymg"


def test_default_suite_table():
    rows = [(t.name, t.method, t.url[len(GATEWAY_BASE):], sorted(t.expected_status))
            for t in default_suite()]
    assert rows == [
        ("People - Get All", "POST", "/people/get-all", [200, 202]),
        ("People - Insert", "POST", "/people/insert", [201, 400]),
        ("Weapons - Get All", "GET", "/weapons", [200]),
        ("Gallery - Get All", "POST", "/gallery/getAll", [401]),
        ("Blackjack - Status", "GET", "/deckofcards/blackjack/status", [401]),
        ("People - Damage Calculation", "GET", "/people/damageWithWeapon?name=TestCharacter", [200, 400]),
        ("People - Get Names", "GET", "/people/names", [200]),
        ("Health Consumer Check", "GET", "/health/consumer", [200, 500]),
    ]
    insert = default_suite()[1]
    assert insert.body == {"name": "TestCharacter", "description": "Test",
                           "bonus": 10, "ability": "Test Ability"}


def test_default_suite_rebased():
    assert default_suite("http://other:9000/g")[2].url == "http://other:9000/g/weapons"


def test_parse_object_with_base(tmp_path):
    path = write(tmp_path, {
        "base": "http://gw.test/tymg",
        "tests": [
            {"name": "Weapons", "path": "/weapons", "expectedStatus": [200]},
            {"name": "Insert", "method": "post", "path": "/people/insert",
             "body": {"name": "X"}, "expected_status": 201, "description": "insert"},
            {"name": "Abs", "url": "http://elsewhere.test/ping", "expectedStatus": [204]},
        ],
    })
    suite = Suite(path)
    tests = suite.parse()
    assert suite.base == "http://gw.test/tymg"
    assert [t.url for t in tests] == [
        "http://gw.test/tymg/weapons",
        "http://gw.test/tymg/people/insert",
        "http://elsewhere.test/ping",
    ]
    assert tests[1].method == "POST"
    assert tests[1].expected_status == frozenset({201})
    assert tests[0].method == "GET"


def test_cli_base_overrides_file_base(tmp_path):
    path = write(tmp_path, {"base": "http://a.test", "tests": [
        {"name": "W", "path": "/weapons", "expectedStatus": [200]}]})
    assert Suite(path).parse(base="http://b.test")[0].url == "http://b.test/weapons"


@pytest.mark.parametrize("payload", [
    "{not json",
    [],
    {"tests": "nope"},
    [{"name": "no path", "expectedStatus": [200]}],
    [{"name": "relative", "path": "/x", "expectedStatus": [200]}],
    {"base": "http://a.test", "tests": [{"name": "s", "path": "/x", "expectedStatus": "200"}]},
    {"base": "http://a.test", "tests": [{"name": "m", "method": "BREW", "path": "/x", "expectedStatus": [200]}]},
    {"base": "http://a.test", "tests": [{"name": "e", "path": "/x", "expectedStatus": []}]},
    {"base": "http://a.test", "tests": ["just a string"]},
])
def test_malformed_suite(tmp_path, payload):
    with pytest.raises(SuiteError):
        Suite(write(tmp_path, payload)).parse()


def test_missing_file(tmp_path):
    with pytest.raises(SuiteError):
        Suite(str(tmp_path / "absent.json")).parse()


def test_select_by_name():
    tests = default_suite()
    assert [t.name for t in select(tests, ["people"])] == [
        "People - Get All", "People - Insert",
        "People - Damage Calculation", "People - Get Names",
    ]
    assert select(tests, None) == tests
    assert select(tests, ["nothing-matches"]) == ()
