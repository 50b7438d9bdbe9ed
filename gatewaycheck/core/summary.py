from typing import Sequence

from gatewaycheck.core.models import Summary, TestResult


def summarize(results: Sequence[TestResult]) -> Summary:
    total = len(results)
    passed = sum(1 for r in results if r.passed)
    failed = total - passed
    rate = round(passed / total * 100, 2) if total else 0.0
    failures = tuple((r.test, r.cause) for r in results if not r.passed)
    return Summary(total=total, passed=passed, failed=failed,
                   success_rate=rate, failures=failures)
