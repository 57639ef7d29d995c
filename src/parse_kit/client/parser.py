# src/parse_kit/client/parser.py

import asyncio
import logging
from collections.abc import Iterable
from time import monotonic
from types import TracebackType
from typing import Any

import httpx

from parse_kit.observability import names
from parse_kit.observability.base import MetricsHook, NoOpMetricsHook

from ._logging import ProgressLogger
from .api import ParseApi
from .config import ClientConfig
from .errors import ParseKitError
from .extractor import ResultExtractor
from .poller import JobPoller
from .sources import ContentSource, describe_input, resolve_source
from .submitter import UploadSubmitter

_logger = logging.getLogger(__name__)

# Failures intercepted by the ignore_errors policy.
HANDLED_ERRORS = (ParseKitError, OSError)


class ParseClient:
    """Client for the remote document-parsing service.

    Stateless per call: the resolved ClientConfig is read-only, so one client
    may serve many concurrent parse() calls.

    Example:
        >>> async with create_parse_client(result_type="markdown") as client:
        ...     text = await client.parse("report.pdf")
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        logger: logging.Logger | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)

        options = config.options
        self._progress = ProgressLogger(logger or _logger, verbose=options.verbose)
        api = ParseApi(self._http, config.api_key, config.base_url)
        self._submitter = UploadSubmitter(api, options, metrics_hook=metrics_hook)
        self._poller = JobPoller(
            api,
            self._progress,
            show_progress=options.show_progress,
            metrics_hook=metrics_hook,
        )
        self._extractor = ResultExtractor(api, self._progress, metrics_hook=metrics_hook)

        self._progress.debug(
            "Initialized ParseClient with base_url=%s, result_type=%s",
            config.base_url,
            options.result_type.value,
        )

    async def parse(self, file_input: Any, file_type: str | None = None) -> Any:
        """Parse one document and return its extracted content.

        Args:
            file_input: Local path, URL, bytes, or a binary stream.
            file_type: Declared type for in-memory content ("pdf", ".pdf" or
                "application/pdf").

        Returns:
            The content for the configured result_type, or None when the
            result is empty or a failure was suppressed by ignore_errors.

        Raises:
            ParseKitError (or OSError reading a local file), only when
            ignore_errors is off.
        """
        start = monotonic()
        self.metrics_hook.increment(names.PARSE_REQUESTS_TOTAL)
        source: ContentSource | None = None
        try:
            source = resolve_source(file_input, file_type)
            result = await self._run(source)
        except HANDLED_ERRORS as exc:
            self.metrics_hook.increment(
                names.PARSE_ERRORS_TOTAL, labels={"error": type(exc).__name__}
            )
            if not self.config.options.ignore_errors:
                raise
            descriptor = source.describe() if source else describe_input(file_input)
            self._progress.error("Error while parsing file (%s): %s", descriptor, exc)
            return None

        self.metrics_hook.record_latency(names.PARSE_DURATION, 1000 * (monotonic() - start))
        return result

    async def parse_many(
        self, file_inputs: Iterable[Any], file_type: str | None = None
    ) -> list[Any]:
        """Parse several documents concurrently, at most num_workers at a time.

        Results come back in input order. Each input runs its own job
        lifecycle; failures follow the same ignore_errors policy as parse().
        """
        semaphore = asyncio.Semaphore(self.config.options.num_workers)

        async def _bounded(file_input: Any) -> Any:
            async with semaphore:
                return await self.parse(file_input, file_type)

        return list(await asyncio.gather(*[_bounded(f) for f in file_inputs]))

    async def _run(self, source: ContentSource) -> Any:
        options = self.config.options

        job_id = await self._submitter.submit(source)
        self._progress.info("Started parsing %s under job_id %s", source.describe(), job_id)

        await self._poller.wait(job_id, options.check_interval, options.max_timeout)
        result = await self._extractor.fetch(job_id, options.result_type.value)
        self._progress.info("Successfully retrieved result")
        return result

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "ParseClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()