"""
Fixed-interval polling for assistant runs.

A run is submitted once and then re-fetched every `interval` seconds while
its status is non-terminal, up to `max_attempts` re-checks. There is no
backoff and no cancellation: the effective timeout is
`interval * max_attempts`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Union


logger = logging.getLogger(__name__)


POLL_INTERVAL_SECONDS = 1.0
MAX_POLL_ATTEMPTS = 30

PENDING_STATUSES = frozenset({"queued", "in_progress"})
COMPLETED_STATUS = "completed"


@dataclass(frozen=True)
class RunCompleted:
    run: Any
    attempts: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class RunFailed:
    """Run ended in a failure status, or was still pending when attempts ran out."""

    status: str
    run: Any
    attempts: int

    @property
    def ok(self) -> bool:
        return False


PollResult = Union[RunCompleted, RunFailed]


def poll_run(
    submit: Callable[[], Any],
    refresh: Callable[[Any], Any],
    *,
    interval: float = POLL_INTERVAL_SECONDS,
    max_attempts: int = MAX_POLL_ATTEMPTS,
    sleep: Callable[[float], None] = time.sleep,
) -> PollResult:
    """
    Submit a run and wait for it to leave the pending states.

    Parameters
    ----------
    submit : callable
        Creates the run; must return an object with a `status` attribute.
    refresh : callable
        Given the last run object, re-fetches it from the remote service.
    interval : float
        Seconds to wait before each re-check.
    max_attempts : int
        Maximum number of re-checks after submission.
    sleep : callable
        Injected for tests; defaults to time.sleep.

    Returns
    -------
    RunCompleted | RunFailed
    """
    run = submit()
    status = run.status
    attempts = 0

    while status in PENDING_STATUSES and attempts < max_attempts:
        sleep(interval)
        run = refresh(run)
        status = run.status
        attempts += 1
        logger.debug("[RUN] Current run status: %s (attempt %d)", status, attempts)

    if status == COMPLETED_STATUS:
        return RunCompleted(run=run, attempts=attempts)

    logger.warning(
        "[RUN] Run ended without completing: status=%s attempts=%d",
        status,
        attempts,
    )
    return RunFailed(status=status, run=run, attempts=attempts)
