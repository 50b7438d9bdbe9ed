"""Write a run's results to a JSON file."""

import json
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, Sequence

from gatewaycheck.core.models import JsonBody, Summary, TestResult, TextBody


def _data(result: TestResult) -> Any:
    if isinstance(result.data, JsonBody):
        return {"kind": "json", "value": result.data.value}
    if isinstance(result.data, TextBody):
        return {"kind": "text", "value": result.data.text}
    return None


def build_report(results: Sequence[TestResult], summary: Summary,
                 gateway: str, backend: str) -> Dict[str, Any]:
    s = asdict(summary)
    s["failures"] = [{"test": name, "cause": cause} for name, cause in summary.failures]
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "gateway": gateway,
        "backend": backend,
        "summary": s,
        "results": [
            {
                "test": r.test,
                "passed": r.passed,
                "status": r.status,
                "reason": r.reason,
                "duration_ms": round(r.duration, 2),
                "error": r.error,
                "data": _data(r),
            }
            for r in results
        ],
    }


def write_report(path: str, results: Sequence[TestResult], summary: Summary,
                 gateway: str, backend: str) -> Dict[str, Any]:
    report = build_report(results, summary, gateway, backend)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=2)
    return report
