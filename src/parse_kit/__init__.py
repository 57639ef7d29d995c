# Client
from .client import (
    ClientConfig,
    ParseClient,
    ParseKitError,
    ParseOptions,
    ResultType,
    create_parse_client,
    resolve_config,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

__all__ = [
    # Client
    "ClientConfig",
    "ParseClient",
    "ParseKitError",
    "ParseOptions",
    "ResultType",
    "create_parse_client",
    "resolve_config",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
]
