# src/parse_kit/client/__init__.py

"""Client for the remote document-parsing service.

One parse call runs one job lifecycle: resolve the input, upload it, poll
the job until it reaches a terminal state, then fetch the result.

Design principles:
- Immutable: options are resolved once per client and never mutated
- Sequential: one poll at a time per job, no retries
- Explicit failures: every failure has its own kind, suppressed only by
  the ignore_errors option

Example:
    >>> from parse_kit.client import create_parse_client
    >>>
    >>> async with create_parse_client(result_type="markdown") as client:
    ...     markdown = await client.parse("/data/report.pdf")
    ...     from_bytes = await client.parse(pdf_bytes, file_type="pdf")
"""

from .config import ClientConfig, ParseOptions, ResultType, resolve_config
from .errors import (
    AmbiguousInput,
    ConfigurationError,
    InputError,
    JobError,
    JobFailed,
    JobTimeout,
    MissingFileType,
    ParseKitError,
    TransportError,
    UnexpectedStatus,
    UnsupportedFileType,
    UnsupportedInputType,
)
from .factory import create_parse_client
from .file_types import SUPPORTED_FILE_TYPES, validate_file_type
from .parser import ParseClient
from .poller import JobState, PollOutcome
from .sources import BytesSource, ContentSource, PathSource, UrlSource, resolve_source

__all__ = [
    # Factory
    "create_parse_client",
    # Client
    "ParseClient",
    # Config
    "ClientConfig",
    "ParseOptions",
    "ResultType",
    "resolve_config",
    # Sources
    "ContentSource",
    "PathSource",
    "BytesSource",
    "UrlSource",
    "resolve_source",
    "SUPPORTED_FILE_TYPES",
    "validate_file_type",
    # Job lifecycle
    "JobState",
    "PollOutcome",
    # Errors
    "ParseKitError",
    "ConfigurationError",
    "TransportError",
    "InputError",
    "UnsupportedFileType",
    "MissingFileType",
    "AmbiguousInput",
    "UnsupportedInputType",
    "JobError",
    "JobTimeout",
    "JobFailed",
    "UnexpectedStatus",
]
