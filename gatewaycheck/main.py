import argparse
import sys

import httpx

from gatewaycheck.core.engine import DEFAULT_DELAY, DEFAULT_TIMEOUT, Verifier
from gatewaycheck.core.errors import GatewayCheckError
from gatewaycheck.core.summary import summarize
from gatewaycheck.exporters.json_report import write_report
from gatewaycheck.parsers.suite import Suite, select
from gatewaycheck.reporters.console import Log
from gatewaycheck.suites.default import BACKEND_BASE, GATEWAY_BASE, default_suite


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Gateway endpoint smoke test")
    p.add_argument("--gateway", default=None,
                   help=f"Gateway base URL (default: {GATEWAY_BASE})")
    p.add_argument("--backend", default=BACKEND_BASE,
                   help="Backend base URL, shown in the report only")
    p.add_argument("--suite", help="JSON suite file (default: built-in suite)")
    p.add_argument("--only", action="append", metavar="NAME",
                   help="Run only tests whose name contains NAME (repeatable)")
    p.add_argument("--proxy", help="Proxy (e.g. http://127.0.0.1:8080)")
    p.add_argument("--delay", type=float, default=DEFAULT_DELAY,
                   help="Seconds to wait between requests")
    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                   help="Per-request timeout in seconds")
    p.add_argument("--json-report", metavar="FILE",
                   help="Also write results to FILE as JSON")
    p.add_argument("--strict", action="store_true",
                   help="Exit with status 1 when any test fails")
    p.add_argument("-v", "--verbose", action="count", default=1,
                   help="-v, -vv")
    p.add_argument("-q", "--quiet", action="store_true",
                   help="Only print outcomes and the summary")
    return p


def run(args: argparse.Namespace) -> int:
    gateway = args.gateway or GATEWAY_BASE
    if args.suite:
        suite = Suite(args.suite)
        tests = suite.parse(base=args.gateway)
        gateway = suite.base or gateway
    else:
        tests = default_suite(gateway)
    tests = select(tests, args.only)

    log = Log(verbose=0 if args.quiet else args.verbose)
    if not tests:
        log.warn("No tests selected.")
        return 0

    log.banner(gateway, args.backend, len(tests))
    with Verifier(proxy=args.proxy, timeout=args.timeout,
                  delay=args.delay, logger=log) as verifier:
        results = verifier.run_all(tests)

    summary = summarize(results)
    log.summary(summary)

    if args.json_report:
        write_report(args.json_report, results, summary, gateway, args.backend)
        log.info(f"JSON report written to {args.json_report}")

    if args.strict and not summary.all_passed:
        return 1
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        code = run(args)
    except (GatewayCheckError, ValueError, OSError, httpx.InvalidURL) as e:
        print(f"Test script failed: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
