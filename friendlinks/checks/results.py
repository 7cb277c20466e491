from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CheckStatus(str, Enum):
    OK = "ok"
    REDIRECT = "redirect"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    name: str
    url: str
    status: CheckStatus
    elapsed_ms: int
    status_code: int | None = None
    redirect_url: str | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        if self.elapsed_ms < 0:
            raise ValueError("elapsed_ms must be non-negative")
        if (self.redirect_url is not None) != (self.status is CheckStatus.REDIRECT):
            raise ValueError("redirect_url is set only for redirect results")

        has_code = self.status_code is not None
        has_message = self.error_message is not None
        if self.status in (CheckStatus.OK, CheckStatus.REDIRECT):
            if not has_code or has_message:
                raise ValueError(f"{self.status.value} results carry a status code only")
        elif self.status is CheckStatus.TIMEOUT:
            if has_code or not has_message:
                raise ValueError("timeout results carry an error message only")
        elif has_code == has_message:
            # HTTP-level errors have a code, transport errors a message.
            raise ValueError("error results carry either a status code or an error message")
