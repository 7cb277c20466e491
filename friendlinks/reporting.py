from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Iterable

from friendlinks.checks.results import CheckResult, CheckStatus
from friendlinks.formatting import format_result

Echo = Callable[[str], None]


@dataclass(frozen=True)
class Summary:
    ok: int = 0
    redirect: int = 0
    timeout: int = 0
    error: int = 0

    @classmethod
    def from_counts(cls, counts: Counter) -> "Summary":
        return cls(
            ok=counts[CheckStatus.OK],
            redirect=counts[CheckStatus.REDIRECT],
            timeout=counts[CheckStatus.TIMEOUT],
            error=counts[CheckStatus.ERROR],
        )

    @classmethod
    def from_results(cls, results: Iterable[CheckResult]) -> "Summary":
        return cls.from_counts(Counter(r.status for r in results))

    @property
    def total(self) -> int:
        return self.ok + self.redirect + self.timeout + self.error

    @property
    def healthy(self) -> bool:
        return self.error + self.timeout == 0


def format_summary(summary: Summary) -> list[str]:
    return [
        "",
        "--- Summary ---",
        f"✅ OK: {summary.ok}",
        f"🔀 Redirects: {summary.redirect}",
        f"⏱️  Timeouts: {summary.timeout}",
        f"❌ Errors: {summary.error}",
    ]


def report(results: Iterable[CheckResult], echo: Echo = print) -> bool:
    """
    Print one line per result as it arrives, then the summary block.

    Returns True when no result is an error or a timeout.
    """
    counts: Counter = Counter()
    for result in results:
        echo(format_result(result))
        counts[result.status] += 1

    summary = Summary.from_counts(counts)
    for line in format_summary(summary):
        echo(line)
    return summary.healthy
