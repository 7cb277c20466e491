from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Iterator, Sequence, TypeVar

from friendlinks.checks.http_check import run_http
from friendlinks.checks.results import CheckResult
from friendlinks.models import Endpoint
from friendlinks.sources import visible

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 5

T = TypeVar("T")
Probe = Callable[[Endpoint], CheckResult]


def batched(items: Sequence[T], size: int) -> Iterator[list[T]]:
    if size < 1:
        raise ValueError(f"batch size must be at least 1, got {size}")
    for i in range(0, len(items), size):
        yield list(items[i : i + size])


def iter_results(
    endpoints: Iterable[Endpoint],
    batch_size: int = DEFAULT_BATCH_SIZE,
    probe: Probe = run_http,
) -> Iterator[CheckResult]:
    """
    Probe visible endpoints group by group.

    Every probe in a group runs concurrently and the whole group is joined
    before the next one is submitted, so at most ``batch_size`` requests are
    in flight. Results are yielded in endpoint order once their group is done.
    """
    groups = list(batched(visible(list(endpoints)), batch_size))
    return _run_groups(groups, batch_size, probe)


def _run_groups(
    groups: list[list[Endpoint]], batch_size: int, probe: Probe
) -> Iterator[CheckResult]:
    if not groups:
        return

    with ThreadPoolExecutor(max_workers=batch_size, thread_name_prefix="probe") as pool:
        for index, group in enumerate(groups):
            logger.debug("Checking group %d/%d (%d sites)", index + 1, len(groups), len(group))
            results = list(pool.map(probe, group))
            yield from results


def run_all(
    endpoints: Iterable[Endpoint],
    batch_size: int = DEFAULT_BATCH_SIZE,
    probe: Probe = run_http,
) -> list[CheckResult]:
    return list(iter_results(endpoints, batch_size=batch_size, probe=probe))
