from __future__ import annotations

from friendlinks.checks.results import CheckResult, CheckStatus


def format_result(result: CheckResult) -> str:
    elapsed = f" ({result.elapsed_ms}ms)"

    if result.status is CheckStatus.OK:
        return f"✅ {result.name}: OK{elapsed}"
    if result.status is CheckStatus.TIMEOUT:
        return f"⏱️  {result.name}: TIMEOUT{elapsed}"
    if result.status is CheckStatus.REDIRECT:
        return f"🔀 {result.name}: {result.status_code} -> {result.redirect_url}{elapsed}"
    if result.status_code is not None:
        return f"❌ {result.name}: HTTP {result.status_code}{elapsed}"
    return f"❌ {result.name}: {result.error_message}{elapsed}"
