# tests/unit/client/test_submitter.py

import os
import tempfile
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock
from urllib.parse import parse_qs

import httpx
import pytest

from parse_kit.client.config import ParseOptions
from parse_kit.client.errors import TransportError, UnsupportedFileType
from parse_kit.client.sources import BytesSource, PathSource, UrlSource
from parse_kit.client.submitter import UploadSubmitter

from fake_service import FakeParseService


def _submitter(service: FakeParseService, **options: Any) -> UploadSubmitter:
    return UploadSubmitter(service.api(), ParseOptions(**options))


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4 path content")
    return path


# --- Path uploads ---


@pytest.mark.asyncio
async def test_path_upload_sends_file_part(service: FakeParseService, pdf_file: Path) -> None:
    job_id = await _submitter(service).submit(PathSource(path=pdf_file))

    assert job_id == "job-1"
    body = service.uploads()[0].content
    assert b'name="file"; filename="report.pdf"' in body
    assert b"Content-Type: application/pdf" in body
    assert b"%PDF-1.4 path content" in body
    assert b'name="input_url"' not in body


@pytest.mark.asyncio
async def test_path_with_unsupported_extension_is_rejected(
    service: FakeParseService, tmp_path: Path
) -> None:
    path = tmp_path / "tool.exe"
    path.write_bytes(b"MZ")

    with pytest.raises(UnsupportedFileType):
        await _submitter(service).submit(PathSource(path=path))

    assert service.requests == []


@pytest.mark.asyncio
async def test_upload_carries_options_and_client_marker(
    service: FakeParseService, pdf_file: Path
) -> None:
    submitter = _submitter(service, language="ja", premium_mode=True, max_timeout=5)

    await submitter.submit(PathSource(path=pdf_file))

    body = service.uploads()[0].content
    assert b'name="language"\r\n\r\nja' in body
    assert b'name="premium_mode"\r\n\r\ntrue' in body
    assert b'name="from_python_package"\r\n\r\ntrue' in body
    assert b'name="max_timeout"' not in body


# --- In-memory uploads ---


@pytest.mark.asyncio
async def test_bytes_upload_sends_file_part(service: FakeParseService) -> None:
    await _submitter(service).submit(BytesSource(data=b"hello bytes", file_type=".txt"))

    body = service.uploads()[0].content
    assert b'name="file"; filename="upload.txt"' in body
    assert b"Content-Type: text/plain" in body
    assert b"hello bytes" in body


@pytest.mark.asyncio
async def test_bytes_with_unsupported_type_is_rejected(service: FakeParseService) -> None:
    with pytest.raises(UnsupportedFileType):
        await _submitter(service).submit(BytesSource(data=b"x", file_type=".exe"))

    assert service.requests == []


@pytest.mark.asyncio
async def test_staging_file_is_removed_after_upload(
    service: FakeParseService, monkeypatch: pytest.MonkeyPatch
) -> None:
    staged = _spy_on_staging(monkeypatch)

    await _submitter(service).submit(BytesSource(data=b"data", file_type=".txt"))

    assert len(staged) == 1
    assert staged[0].closed
    assert not os.path.exists(staged[0].name)


@pytest.mark.asyncio
async def test_staging_file_is_removed_when_upload_fails(
    service: FakeParseService, monkeypatch: pytest.MonkeyPatch
) -> None:
    staged = _spy_on_staging(monkeypatch)
    service.upload_handler = lambda request: httpx.Response(500, text="boom")

    with pytest.raises(TransportError):
        await _submitter(service).submit(BytesSource(data=b"data", file_type=".txt"))

    assert staged[0].closed
    assert not os.path.exists(staged[0].name)


def _spy_on_staging(monkeypatch: pytest.MonkeyPatch) -> list[Any]:
    real = tempfile.NamedTemporaryFile
    staged: list[Any] = []

    def spy(*args: Any, **kwargs: Any) -> Any:
        handle = real(*args, **kwargs)
        staged.append(handle)
        return handle

    monkeypatch.setattr(tempfile, "NamedTemporaryFile", spy)
    return staged


# --- URL uploads ---


@pytest.mark.asyncio
async def test_url_upload_sends_input_url_without_file(service: FakeParseService) -> None:
    await _submitter(service).submit(UrlSource(url="https://example.com/a.pdf"))

    request = service.uploads()[0]
    form = parse_qs(request.content.decode(), keep_blank_values=True)
    assert form["input_url"] == ["https://example.com/a.pdf"]
    assert form["from_python_package"] == ["true"]
    assert "file" not in form
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_upload_params_include_input_url_only_when_given(service: FakeParseService) -> None:
    submitter = _submitter(service)

    assert "input_url" not in submitter.upload_params()
    assert submitter.upload_params(url="https://x.test/a")["input_url"] == "https://x.test/a"


# --- Metrics ---


@pytest.mark.asyncio
async def test_submission_is_counted_by_source_kind(service: FakeParseService) -> None:
    metrics_hook = MagicMock()
    submitter = UploadSubmitter(service.api(), ParseOptions(), metrics_hook=metrics_hook)

    await submitter.submit(UrlSource(url="https://example.com/a.pdf"))

    metrics_hook.increment.assert_called_once_with(
        "jobs_submitted_total", labels={"source": "url"}
    )
