# src/parse_kit/client/submitter.py

import logging
import tempfile
from typing import Any

from parse_kit.observability import names
from parse_kit.observability.base import MetricsHook, NoOpMetricsHook

from .api import ParseApi
from .config import ParseOptions
from .file_types import detect_content_type, validate_file_type
from .sources import BytesSource, ContentSource, PathSource, UrlSource

logger = logging.getLogger(__name__)

# Provenance marker sent with every upload.
CLIENT_MARKER = {"from_python_package": "true"}

URL_UPLOAD_TIMEOUT = 30.0


class UploadSubmitter:
    """Turns a ContentSource into a submitted job.

    One handler per source variant. Every request carries the forwarded
    parse options and exactly one of `file` or `input_url`.
    """

    def __init__(
        self,
        api: ParseApi,
        options: ParseOptions,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._api = api
        self._options = options
        self.metrics_hook = metrics_hook

    async def submit(self, source: ContentSource) -> str:
        if isinstance(source, PathSource):
            job_id = await self._submit_path(source)
        elif isinstance(source, BytesSource):
            job_id = await self._submit_bytes(source)
        elif isinstance(source, UrlSource):
            job_id = await self._submit_url(source)
        else:
            raise TypeError(f"Unknown content source: {source!r}")

        self.metrics_hook.increment(names.JOBS_SUBMITTED_TOTAL, labels={"source": source.kind})
        return job_id

    def upload_params(self, *, url: str | None = None) -> dict[str, str]:
        """Form fields for an upload request, without the file part."""
        params = self._options.form_fields()
        params.update(CLIENT_MARKER)
        if url is not None:
            params["input_url"] = url
        return params

    async def _submit_path(self, source: PathSource) -> str:
        validate_file_type(str(source.path))
        content_type = detect_content_type(source.path.name)
        logger.debug("Uploading %s as %s", source.path, content_type)

        with source.path.open("rb") as f:
            return await self._api.upload(
                self.upload_params(),
                files={"file": (source.path.name, f, content_type)},
            )

    async def _submit_bytes(self, source: BytesSource) -> str:
        validate_file_type(source.file_type)
        filename = f"upload{source.file_type}"
        content_type = detect_content_type(filename)
        logger.debug("Uploading %d bytes as %s", len(source.data), content_type)

        # Staged through a temp file; the with-block removes it on every exit path.
        with tempfile.NamedTemporaryFile(prefix="upload", suffix=source.file_type) as staging:
            staging.write(source.data)
            staging.flush()
            staging.seek(0)
            files: dict[str, Any] = {"file": (filename, staging, content_type)}
            return await self._api.upload(self.upload_params(), files=files)

    async def _submit_url(self, source: UrlSource) -> str:
        logger.debug("Creating job from URL: %s", source.url)
        return await self._api.upload(
            self.upload_params(url=source.url),
            headers={"Accept": "application/json"},
            timeout=URL_UPLOAD_TIMEOUT,
        )
