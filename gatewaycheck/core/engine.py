import time
from typing import Callable, List, Sequence

import httpx
from colorama import Style

from gatewaycheck.core.errors import DecodeError
from gatewaycheck.core.models import TestCase, TestResult
from gatewaycheck.parsers.response import decode_body

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

DEFAULT_DELAY = 0.5      # seconds between two calls
DEFAULT_TIMEOUT = 10


def describe(exc: Exception) -> str:
    msg = str(exc)
    return f"{type(exc).__name__}: {msg}" if msg else type(exc).__name__


class Verifier:
    def __init__(self, client: httpx.Client | None = None, proxy: str | None = None,
                 timeout: float = DEFAULT_TIMEOUT, delay: float = DEFAULT_DELAY,
                 logger=None, sleep: Callable[[float], None] = time.sleep):
        self.delay = delay
        self.logger = logger
        self._sleep = sleep
        self._owns_client = client is None
        self.client = client or httpx.Client(
            proxy=proxy, follow_redirects=True, timeout=timeout)

    def close(self):
        if self._owns_client:
            self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _send(self, test: TestCase) -> httpx.Response:
        if test.sends_body:
            return self.client.request(method=test.method, url=test.url,
                                       headers=JSON_HEADERS, json=test.body)
        return self.client.request(method=test.method, url=test.url, headers=JSON_HEADERS)

    def execute_one(self, test: TestCase) -> TestResult:
        if self.logger:
            self.logger.test_header(test)
            self.logger.debug(f"→ {test.method} {test.url}")
            if test.sends_body:
                self.logger.debug(
                    f"  body = {self.logger.DIM}{test.body}{Style.RESET_ALL}")

        start = time.perf_counter()
        try:
            resp = self._send(test)
            data = decode_body(resp.headers.get("content-type"),
                               resp.content, resp.charset_encoding or "utf-8")
        except (httpx.HTTPError, DecodeError) as e:
            elapsed = (time.perf_counter() - start) * 1000
            result = TestResult(test=test.name, passed=False,
                                duration=elapsed, error=describe(e))
            if self.logger:
                self.logger.network_error(test, result)
            return result
        elapsed = (time.perf_counter() - start) * 1000

        result = TestResult(
            test=test.name,
            passed=test.accepts(resp.status_code),
            duration=elapsed,
            status=resp.status_code,
            reason=resp.reason_phrase,
            data=data,
        )
        if self.logger:
            self.logger.debug(f"← {resp.status_code} {resp.headers.get('content-type', '-')}")
            self.logger.test_outcome(test, result)
        return result

    def run_all(self, tests: Sequence[TestCase]) -> List[TestResult]:
        results: List[TestResult] = []
        for i, test in enumerate(tests):
            if i and self.delay > 0:
                self._sleep(self.delay)
            results.append(self.execute_one(test))
        return results
