"""Shared data models for the gateway checker."""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Union
from urllib.parse import urlsplit


METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


@dataclass(frozen=True)
class TestCase:
    """One HTTP call and the status codes it is allowed to answer with."""
    __test__ = False  # keep pytest from collecting this class

    name: str
    method: str
    url: str
    expected_status: FrozenSet[int]
    body: Optional[Dict[str, Any]] = None
    description: str = ""

    def __post_init__(self):
        method = self.method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported method {self.method!r} in {self.name!r}")
        object.__setattr__(self, "method", method)

        parts = urlsplit(self.url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"URL must be absolute http(s): {self.url!r}")

        codes = frozenset(self.expected_status)
        if not codes:
            raise ValueError(f"expected_status is empty for {self.name!r}")
        for code in codes:
            if isinstance(code, bool) or not isinstance(code, int) or not 100 <= code <= 599:
                raise ValueError(f"Invalid HTTP status {code!r} in {self.name!r}")
        object.__setattr__(self, "expected_status", codes)

        if self.body is not None and not isinstance(self.body, dict):
            raise ValueError(f"body must be a mapping in {self.name!r}")

    @property
    def sends_body(self) -> bool:
        return self.body is not None and self.method != "GET"

    def accepts(self, status: int) -> bool:
        return status in self.expected_status


@dataclass(frozen=True)
class JsonBody:
    """Response body decoded from JSON."""
    value: Any


@dataclass(frozen=True)
class TextBody:
    """Response body kept as raw text."""
    text: str


Decoded = Union[JsonBody, TextBody]


@dataclass
class TestResult:
    """Outcome of executing one TestCase.

    Either ``status`` (the call completed) or ``error`` (it could not run)
    is set, never both.
    """
    __test__ = False

    test: str
    passed: bool
    duration: float = 0.0          # milliseconds
    status: Optional[int] = None
    reason: str = ""               # reason phrase, e.g. "Not Found"
    data: Optional[Decoded] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.status is None) == (self.error is None):
            raise ValueError(
                f"TestResult for {self.test!r} needs exactly one of status/error")

    @property
    def cause(self) -> str:
        return self.error if self.error is not None else f"Status: {self.status}"

    def __str__(self):
        mark = "PASS" if self.passed else "FAIL"
        return f"[{mark}] {self.test} - {self.cause} ({self.duration:.0f}ms)"


@dataclass(frozen=True)
class Summary:
    """Aggregate counts over a run."""
    total: int
    passed: int
    failed: int
    success_rate: float            # percentage, two decimals
    failures: tuple = field(default_factory=tuple)  # (name, cause) pairs

    @property
    def all_passed(self) -> bool:
        return self.failed == 0
