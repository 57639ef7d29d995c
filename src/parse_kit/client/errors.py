# src/parse_kit/client/errors.py

"""Failure kinds raised by the parse client.

Every error derives from ParseKitError so callers can catch the whole family,
or a single kind when they need to tell "job failed" apart from "job never
finished".
"""


class ParseKitError(Exception):
    """Base class for all parse-kit failures."""


class ConfigurationError(ParseKitError):
    """Missing credential or invalid option value."""


class TransportError(ParseKitError):
    """A network or HTTP fault below the job protocol."""


# ============================================================================
# Input errors
# ============================================================================


class InputError(ParseKitError, ValueError):
    """The content handed to parse() cannot be submitted."""


class UnsupportedFileType(InputError):
    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension or '<none>'}")


class MissingFileType(InputError):
    def __init__(self, kind: str = "in-memory data") -> None:
        self.kind = kind
        super().__init__(f"file_type parameter is required for {kind}")


class AmbiguousInput(InputError):
    def __init__(self) -> None:
        super().__init__(
            "Input is neither an existing file path nor a URL; "
            "pass file_type to treat it as binary content"
        )


class UnsupportedInputType(InputError, TypeError):
    def __init__(self, input_type: type) -> None:
        self.input_type = input_type
        super().__init__(
            "Invalid input type. Expected a file path, URL, bytes or binary "
            f"stream, got {input_type.__name__}"
        )


# ============================================================================
# Job errors
# ============================================================================


class JobError(ParseKitError):
    """The remote job did not reach a successful terminal state."""

    def __init__(self, job_id: str, message: str) -> None:
        self.job_id = job_id
        super().__init__(message)


class JobTimeout(JobError):
    def __init__(self, job_id: str, max_timeout: float) -> None:
        self.max_timeout = max_timeout
        super().__init__(job_id, f"Job {job_id} timed out after {max_timeout} seconds")


class JobFailed(JobError):
    def __init__(self, job_id: str, error_code: str, error_message: str) -> None:
        self.error_code = error_code
        self.error_message = error_message
        super().__init__(job_id, f"Job failed: {error_code} - {error_message}")


class UnexpectedStatus(JobError):
    def __init__(self, job_id: str, status: object) -> None:
        self.status = status
        super().__init__(job_id, f"Unexpected status: {status}")
