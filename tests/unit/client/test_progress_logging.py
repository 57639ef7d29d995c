# tests/unit/client/test_progress_logging.py

import logging

import pytest

from parse_kit.client._logging import PLACEHOLDER, ProgressLogger, sanitize


def test_sanitize_replaces_undecodable_bytes() -> None:
    assert sanitize(b"caf\xc3\xa9 \xff\xfe") == f"café {PLACEHOLDER}{PLACEHOLDER}"


def test_sanitize_replaces_lone_surrogates() -> None:
    assert sanitize("broken \udcff text") == f"broken {PLACEHOLDER} text"


def test_sanitize_keeps_valid_text() -> None:
    assert sanitize("日本語 ✓") == "日本語 ✓"
    assert sanitize(42) == "42"


def test_logs_sanitized_messages(caplog: pytest.LogCaptureFixture) -> None:
    progress = ProgressLogger(logging.getLogger("parse_kit.tests.progress"))

    with caplog.at_level(logging.INFO, logger="parse_kit.tests.progress"):
        progress.info("Body: %s", b"ok \xff")
        progress.info("Text: %s", "bad \udcff")

    assert caplog.messages == ["Body: ok ?", "Text: bad ?"]


def test_levels_are_preserved(caplog: pytest.LogCaptureFixture) -> None:
    progress = ProgressLogger(logging.getLogger("parse_kit.tests.progress"))

    with caplog.at_level(logging.DEBUG, logger="parse_kit.tests.progress"):
        progress.debug("d")
        progress.info("i")
        progress.warning("w")
        progress.error("e")

    assert [r.levelno for r in caplog.records] == [
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
    ]


def test_quiet_when_not_verbose(caplog: pytest.LogCaptureFixture) -> None:
    progress = ProgressLogger(logging.getLogger("parse_kit.tests.progress"), verbose=False)

    with caplog.at_level(logging.DEBUG, logger="parse_kit.tests.progress"):
        progress.error("should not appear")

    assert caplog.records == []
