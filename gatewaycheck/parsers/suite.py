from typing import Dict, List, Optional, Tuple
import json

from gatewaycheck.core.errors import SuiteError
from gatewaycheck.core.models import TestCase


def join_url(base: str, path: str) -> str:
    """Append *path* to *base* keeping exactly one slash between them."""
    if not path:
        return base
    return base.rstrip("/") + "/" + path.lstrip("/")


class Suite:
    def __init__(self, suiteFilename: str) -> None:
        """
        Either a bare list of cases:

            [{"name": "...", "method": "GET", "path": "/weapons", "expectedStatus": [200]}]

        or an object carrying the base URL:

            {"base": "http://localhost:8082/tymg", "tests": [...]}

        A case may give a full "url" instead of "path".
        """

        self.base = ""
        self.tests: Tuple[TestCase, ...] = ()

        self.suiteFilename = suiteFilename

    def parse(self, base: Optional[str] = None) -> Tuple[TestCase, ...]:
        try:
            with open(self.suiteFilename, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except OSError as e:
            raise SuiteError(f"Cannot read suite file {self.suiteFilename!r}: {e}") from e
        except json.JSONDecodeError as e:
            raise SuiteError(f"Suite file {self.suiteFilename!r} is not valid JSON: {e}") from e

        if isinstance(raw, dict):
            entries = raw.get("tests")
            self.base = base or raw.get("base", "")
        else:
            entries = raw
            self.base = base or ""

        if not isinstance(entries, list) or not entries:
            raise SuiteError("Suite must contain a non-empty list of tests.")

        self.tests = tuple(self._case(i, e) for i, e in enumerate(entries))
        return self.tests

    def _case(self, index: int, entry: Dict) -> TestCase:
        if not isinstance(entry, dict):
            raise SuiteError(f"Test #{index} is not an object.")

        name = entry.get("name") or f"Test #{index}"
        expected = entry.get("expectedStatus", entry.get("expected_status"))
        if isinstance(expected, int):
            expected = [expected]
        if not isinstance(expected, list):
            raise SuiteError(f"{name}: expectedStatus must be a list of status codes.")

        url = entry.get("url")
        if not url:
            if "path" not in entry:
                raise SuiteError(f"{name}: needs either 'url' or 'path'.")
            if not self.base:
                raise SuiteError(f"{name}: relative path with no base URL.")
            url = join_url(self.base, entry["path"])

        try:
            return TestCase(
                name=name,
                method=entry.get("method", "GET"),
                url=url,
                expected_status=frozenset(expected),
                body=entry.get("body"),
                description=entry.get("description", ""),
            )
        except (ValueError, TypeError) as e:
            raise SuiteError(f"{name}: {e}") from e

    def __str__(self) -> str:
        return f"Suite: {self.suiteFilename}\nBase: {self.base}\nTests: {len(self.tests)}"


def select(tests: Tuple[TestCase, ...], only: Optional[List[str]]) -> Tuple[TestCase, ...]:
    """Keep cases whose name contains any of *only* (case-insensitive)."""
    if not only:
        return tests
    needles = [o.lower() for o in only]
    return tuple(t for t in tests if any(n in t.name.lower() for n in needles))
