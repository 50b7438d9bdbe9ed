from colorama import init as colorama_init, Fore, Style
from datetime import datetime

from gatewaycheck.core.models import Summary, TestCase, TestResult
from gatewaycheck.parsers.response import preview, shape

colorama_init(autoreset=True)

RULE = "=" * 80


class Log:
    def __init__(self, verbose: int = 1):
        self.verbose = verbose
        self.DIM = Style.DIM

    def _time(self):
        return datetime.now().strftime("[%H:%M:%S]")

    def _fmt(self, level: str, color: str):
        return f"{self._time()} {color}[{level}]{Style.RESET_ALL}"

    def info(self, msg: str):
        if self.verbose >= 1:
            print(f"{self._fmt('INFO', Fore.CYAN)} {msg}")

    def warn(self, msg: str):
        if self.verbose >= 0:
            print(f"{self._fmt('WARNING', Fore.YELLOW)} {msg}")

    def ok(self, msg: str):
        print(f"{self._fmt('SUCCESS', Fore.GREEN)} {msg}")

    def fail(self, msg: str):
        print(f"{self._fmt('FAIL', Fore.RED)} {msg}")

    def debug(self, msg: str):
        if self.verbose >= 2:
            print(f"{self._fmt('DEBUG', Fore.MAGENTA)} {msg}")

    # ── run-level blocks ────────────────────────────────────────

    def banner(self, gateway: str, backend: str, count: int):
        if self.verbose < 1:
            return
        print(f"\n{Fore.CYAN}Gateway smoke test{Style.RESET_ALL}\n")
        print(f"Gateway: {gateway}")
        print(f"Backend: {backend}")
        print(f"Tests:   {count}")
        print("\n  client → Gateway routes → Backend REST controllers → Database\n")

    def test_header(self, test: TestCase):
        if self.verbose < 1:
            return
        print(f"\n{RULE}")
        print(f"Test:   {test.name}")
        print(f"URL:    {test.url}")
        print(f"Method: {test.method}")
        if test.description:
            print(f"Flow:   {test.description}")
        print(RULE)

    def test_outcome(self, test: TestCase, result: TestResult):
        mark = f"{Fore.GREEN}PASS" if result.passed else f"{Fore.RED}FAIL"
        print(f"\n{mark}{Style.RESET_ALL} {test.name}")
        print(f"Status:   {result.status} {result.reason}".rstrip())
        print(f"Duration: {result.duration:.0f}ms")

        if 200 <= result.status < 300:
            kind = shape(result.data)
            if kind and self.verbose >= 1:
                print(f"Response: {kind}")
        else:
            print(f"Preview:  {self.DIM}{preview(result.data)}{Style.RESET_ALL}")

        if not result.passed:
            expected = ", ".join(str(c) for c in sorted(test.expected_status))
            self.warn(f"{test.name}: expected {expected}, got {result.status}")

    def network_error(self, test: TestCase, result: TestResult):
        print(f"\n{Fore.RED}ERROR{Style.RESET_ALL} {test.name}")
        print(f"Cause: {result.error}")

    def summary(self, s: Summary):
        print(f"\n{RULE}")
        print("Summary")
        print(RULE)
        print(f"\nTotal:        {s.total}")
        print(f"{Fore.GREEN}Passed:{Style.RESET_ALL}       {s.passed}")
        print(f"{Fore.RED}Failed:{Style.RESET_ALL}       {s.failed}")
        print(f"Success rate: {s.success_rate:.2f}%")

        if s.all_passed:
            self.ok("All tests passed: gateway routes reach the backend.")
        else:
            self.fail("Some tests failed. Check that:")
            print("   - the backend is running")
            print("   - the gateway is running")
            print("   - the gateway route configuration is correct")
            print("\nFailed tests:")
            for name, cause in s.failures:
                print(f"   {Fore.RED}x{Style.RESET_ALL} {name} - {cause}")
        print()
