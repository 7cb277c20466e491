from __future__ import annotations

import time

import requests

from friendlinks.checks.results import CheckResult, CheckStatus
from friendlinks.config import settings
from friendlinks.models import Endpoint

DEFAULT_TIMEOUT_MS = 10000


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _timed_out(endpoint: Endpoint, timeout_ms: int, elapsed_ms: int) -> CheckResult:
    return CheckResult(
        name=endpoint.name,
        url=endpoint.url,
        status=CheckStatus.TIMEOUT,
        elapsed_ms=elapsed_ms,
        error_message=f"Timeout after {timeout_ms}ms",
    )


def run_http(
    endpoint: Endpoint,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    user_agent: str | None = None,
) -> CheckResult:
    """Probe one endpoint with a single GET. Failures come back as results."""
    headers = {"User-Agent": user_agent or settings.CHECK_USER_AGENT}
    start = time.perf_counter()
    try:
        # requests bounds each socket operation, not the whole exchange, so
        # the deadline is checked again once the headers are in.
        # stream=True returns once headers arrive; the body is never read.
        with requests.get(
            endpoint.url,
            headers=headers,
            timeout=timeout_ms / 1000,
            allow_redirects=False,
            stream=True,
        ) as r:
            elapsed_ms = _elapsed_ms(start)
            status_code = r.status_code
            location = r.headers.get("Location") or ""
    except requests.Timeout:
        return _timed_out(endpoint, timeout_ms, _elapsed_ms(start))
    except Exception as e:
        return CheckResult(
            name=endpoint.name,
            url=endpoint.url,
            status=CheckStatus.ERROR,
            elapsed_ms=_elapsed_ms(start),
            error_message=str(e) or e.__class__.__name__,
        )

    if elapsed_ms >= timeout_ms:
        return _timed_out(endpoint, timeout_ms, elapsed_ms)
    if 300 <= status_code < 400:
        return CheckResult(
            name=endpoint.name,
            url=endpoint.url,
            status=CheckStatus.REDIRECT,
            elapsed_ms=elapsed_ms,
            status_code=status_code,
            redirect_url=location,
        )
    return CheckResult(
        name=endpoint.name,
        url=endpoint.url,
        status=CheckStatus.OK if status_code == 200 else CheckStatus.ERROR,
        elapsed_ms=elapsed_ms,
        status_code=status_code,
    )
