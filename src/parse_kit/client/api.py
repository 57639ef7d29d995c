# src/parse_kit/client/api.py

import logging
from typing import Any

import httpx

from .errors import TransportError

logger = logging.getLogger(__name__)


class ParseApi:
    """HTTP boundary of the parsing service.

    Transport only: one method per service operation, no retries, no job
    logic. Every httpx failure surfaces as TransportError.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, base_url: str) -> None:
        self._http = http_client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def upload(
        self,
        data: dict[str, str],
        files: dict[str, Any] | None = None,
        *,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> str:
        """POST upload. Returns the job id assigned by the service."""
        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = timeout
        body = await self._request(
            "POST",
            "upload",
            data=data,
            files=files,
            headers=self._headers(headers),
            **kwargs,
        )
        job_id = body.get("id") if isinstance(body, dict) else None
        if not job_id:
            raise TransportError(f"Upload response did not include a job id: {body!r}")
        return str(job_id)

    async def get_job(self, job_id: str) -> dict[str, Any]:
        """GET job/{id}. Read-only."""
        body = await self._request("GET", f"job/{job_id}", headers=self._headers())
        if not isinstance(body, dict):
            raise TransportError(f"Job status response is not an object: {body!r}")
        return body

    async def get_result(self, job_id: str, result_type: str) -> Any:
        """GET job/{id}/result/{type}. Read-only; returns the decoded body."""
        return await self._request(
            "GET", f"job/{job_id}/result/{result_type}", headers=self._headers()
        )

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        if extra:
            headers.update(extra)
        return headers

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self._base_url}/{path}"
        logger.debug("%s %s", method, url)
        try:
            response = await self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        # JSON when the service sends it, the raw text otherwise
        try:
            return response.json()
        except ValueError:
            return response.text
