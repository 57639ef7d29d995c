# src/parse_kit/client/poller.py

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from time import monotonic

from parse_kit.observability import names
from parse_kit.observability.base import MetricsHook, NoOpMetricsHook

from ._logging import ProgressLogger
from .api import ParseApi
from .errors import JobFailed, JobTimeout, UnexpectedStatus

SUCCESS_STATUSES = frozenset({"SUCCESS", "COMPLETED"})
ERROR_STATUS = "ERROR"
PENDING_STATUS = "PENDING"

NO_ERROR_CODE = "No error code found"
NO_ERROR_MESSAGE = "No error message found"


class JobState(str, Enum):
    """Client-side lifecycle of a submitted job."""

    SUBMITTED = "submitted"
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class PollOutcome:
    """Terminal success of a poll loop."""

    job_id: str
    state: JobState
    status: str
    polls: int
    elapsed_s: float


class JobPoller:
    """Drives a job id to a terminal state.

    Strictly sequential: sleep, query, check the timeout budget, interpret.
    The timeout check runs before the status is interpreted, so a SUCCESS that
    arrives after the budget is spent still ends in JobTimeout.

    The sleep suspends only the calling task. Run independent parses on
    separate tasks to overlap their waits.
    """

    def __init__(
        self,
        api: ParseApi,
        progress: ProgressLogger,
        *,
        show_progress: bool = True,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
        clock: Callable[[], float] = monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._api = api
        self._progress = progress
        self._show_progress = show_progress
        self.metrics_hook = metrics_hook
        self._clock = clock
        self._sleep = sleep

    async def wait(self, job_id: str, check_interval: float, max_timeout: float) -> PollOutcome:
        """Poll until the job succeeds.

        Raises:
            JobTimeout: Elapsed time exceeded max_timeout.
            JobFailed: The service reported ERROR.
            UnexpectedStatus: The service reported an unknown status.
            TransportError: A status request failed.
        """
        start = self._clock()
        polls = 0

        while True:
            await self._sleep(check_interval)
            response = await self._api.get_job(job_id)
            polls += 1
            self.metrics_hook.increment(names.JOB_STATUS_POLLS_TOTAL)

            status = response.get("status")
            self._progress.debug("Status: %s", status)

            elapsed = self._clock() - start
            if elapsed > max_timeout:
                self._record_failure(JobState.TIMED_OUT)
                raise JobTimeout(job_id, max_timeout)

            if not isinstance(status, str):
                self._record_failure(JobState.FAILED)
                raise UnexpectedStatus(job_id, status)

            if status in SUCCESS_STATUSES:
                self.metrics_hook.record_latency(names.JOB_WAIT_DURATION, 1000 * elapsed)
                return PollOutcome(
                    job_id=job_id,
                    state=JobState.SUCCEEDED,
                    status=status,
                    polls=polls,
                    elapsed_s=elapsed,
                )

            if status == ERROR_STATUS:
                self._record_failure(JobState.FAILED)
                raise JobFailed(
                    job_id,
                    response.get("error_code") or NO_ERROR_CODE,
                    response.get("error_message") or NO_ERROR_MESSAGE,
                )

            if status != PENDING_STATUS:
                self._record_failure(JobState.FAILED)
                raise UnexpectedStatus(job_id, status)

            if self._show_progress:
                self._progress.info("Job %s pending (%.1fs elapsed)", job_id, elapsed)

    def _record_failure(self, state: JobState) -> None:
        self.metrics_hook.increment(names.JOB_FAILURES_TOTAL, labels={"state": state.value})
