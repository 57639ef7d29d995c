import logging

import pytest
from fake_service import FakeParseService

from parse_kit.client._logging import ProgressLogger


@pytest.fixture
def service() -> FakeParseService:
    return FakeParseService()


@pytest.fixture
def progress() -> ProgressLogger:
    return ProgressLogger(logging.getLogger("parse_kit.tests"), verbose=True)
