# src/parse_kit/client/extractor.py

from typing import Any

from parse_kit.observability import names
from parse_kit.observability.base import MetricsHook, NoOpMetricsHook

from ._logging import ProgressLogger
from .api import ParseApi

FALLBACK_FIELD = "content"


class ResultExtractor:
    """Fetches a finished job's result and pulls out the content."""

    def __init__(
        self,
        api: ParseApi,
        progress: ProgressLogger,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._api = api
        self._progress = progress
        self.metrics_hook = metrics_hook

    async def fetch(self, job_id: str, result_type: str) -> Any:
        body = await self._api.get_result(job_id, result_type)
        self._progress.info("Result type: %s", result_type)
        self._progress.debug("Raw response body: %r", body)
        return self.extract(body, result_type)

    def extract(self, body: Any, result_type: str) -> Any:
        """Content of a result body, or None when it carries none.

        Mappings yield body[result_type], falling back to body["content"].
        Any other body is the content itself.
        """
        if isinstance(body, dict):
            content = body.get(result_type)
            if content is None:
                content = body.get(FALLBACK_FIELD)
        else:
            content = body

        if content is None:
            self._progress.warning("Warning: No content found in response")
            self.metrics_hook.increment(names.PARSE_RESULTS_EMPTY)
        return content
