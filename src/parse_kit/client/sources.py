# src/parse_kit/client/sources.py

"""Content sources: where the bytes to parse come from.

The caller's input is resolved exactly once, at the parse() boundary, into
one of three immutable variants. Each variant has its own upload handler.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar, Literal
from urllib.parse import urlsplit

from .errors import AmbiguousInput, MissingFileType, UnsupportedInputType
from .file_types import normalize_extension

SourceKind = Literal["path", "bytes", "url"]


@dataclass(frozen=True)
class PathSource:
    """A file on the local filesystem."""

    path: Path
    kind: ClassVar[SourceKind] = "path"

    def describe(self) -> str:
        return f"file path: {self.path}"


@dataclass(frozen=True)
class BytesSource:
    """In-memory content with a declared file type (normalized, e.g. ".pdf")."""

    data: bytes = field(repr=False)
    file_type: str
    kind: ClassVar[SourceKind] = "bytes"

    def describe(self) -> str:
        return "binary data"


@dataclass(frozen=True)
class UrlSource:
    """A remote document the service fetches itself."""

    url: str
    kind: ClassVar[SourceKind] = "url"

    def describe(self) -> str:
        return f"URL: {self.url}"


ContentSource = PathSource | BytesSource | UrlSource


def is_url(value: str) -> bool:
    """True for a well-formed absolute URL (scheme and host present)."""
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def resolve_source(file_input: Any, file_type: str | None = None) -> ContentSource:
    """Resolve a caller input into a ContentSource.

    Dispatch:
    - bytes-like or binary stream -> BytesSource (file_type required)
    - str / PathLike naming an existing file -> PathSource
    - str that is an absolute URL -> UrlSource
    - any other str with file_type -> BytesSource of its UTF-8 encoding

    Raises:
        MissingFileType: In-memory content without a declared type.
        AmbiguousInput: A string that is no file, no URL, and has no type.
        UnsupportedInputType: Anything else.
    """
    if isinstance(file_input, (bytes, bytearray, memoryview)):
        if not file_type:
            raise MissingFileType("binary data")
        return BytesSource(data=bytes(file_input), file_type=normalize_extension(file_type))

    if hasattr(file_input, "read"):
        if not file_type:
            raise MissingFileType("file-like objects")
        return BytesSource(data=_read_stream(file_input), file_type=normalize_extension(file_type))

    if isinstance(file_input, os.PathLike):
        file_input = os.fspath(file_input)
        if isinstance(file_input, bytes):
            file_input = os.fsdecode(file_input)

    if isinstance(file_input, str):
        if os.path.isfile(file_input):
            return PathSource(path=Path(file_input))
        if is_url(file_input):
            return UrlSource(url=file_input)
        if file_type:
            return BytesSource(
                data=file_input.encode("utf-8"),
                file_type=normalize_extension(file_type),
            )
        raise AmbiguousInput()

    raise UnsupportedInputType(type(file_input))


def describe_input(file_input: Any) -> str:
    """Short, log-safe description of a raw input that may not have resolved."""
    if isinstance(file_input, os.PathLike):
        return f"file path: {os.fspath(file_input)!s}"
    if isinstance(file_input, str):
        if is_url(file_input):
            return f"URL: {file_input}"
        if os.path.isabs(file_input):
            return f"file path: {file_input}"
    return "binary data"


def _read_stream(stream: Any) -> bytes:
    # Non-seekable streams are read from their current position.
    if getattr(stream, "seekable", None) and stream.seekable():
        stream.seek(0)
    data = stream.read()
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)
