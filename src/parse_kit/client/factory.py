# src/parse_kit/client/factory.py

import logging
from typing import Any

import httpx

from parse_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import resolve_config
from .parser import ParseClient


def create_parse_client(
    api_key: str | None = None,
    *,
    base_url: str | None = None,
    timeout: float = 60.0,
    http_client: httpx.AsyncClient | None = None,
    logger: logging.Logger | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
    **options: Any,
) -> ParseClient:
    """Create a parse client from explicit arguments and the environment.

    Args:
        api_key: Service credential. Falls back to LLAMA_CLOUD_API_KEY.
        base_url: Service endpoint. Falls back to LLAMA_CLOUD_BASE_URL.
        timeout: Per-request HTTP timeout in seconds.
        http_client: Optional pre-built httpx.AsyncClient (not closed by the client).
        logger: Optional logger for progress and failure lines.
        metrics_hook: Optional metrics hook for observability.
        **options: ParseOptions overrides; unknown keys are forwarded.

    Returns:
        Configured ParseClient.

    Raises:
        ConfigurationError: No credential, or an invalid option value.

    Example:
        >>> client = create_parse_client(result_type="markdown", language="fr")
        >>> text = await client.parse("/tmp/report.pdf")
    """
    config = resolve_config(api_key, options, base_url=base_url, timeout=timeout)
    return ParseClient(
        config,
        http_client=http_client,
        logger=logger,
        metrics_hook=metrics_hook,
    )
