"""Pytest configuration."""
from unittest.mock import MagicMock

import pytest

from s3_upload_action.models.config import (
    AWSConfig,
    Config,
    LoggingConfig,
    SourceConfig,
)
from s3_upload_action.utils.logger import LoggerManager


@pytest.fixture(autouse=True)
def logger():
    """テストごとにロガーを作り直す"""
    LoggerManager.reset()
    logger = LoggerManager.setup(LoggingConfig(level="DEBUG"))
    yield logger
    LoggerManager.reset()


@pytest.fixture
def captured_logs(logger, caplog):
    """propagate しないロガーのレコードを caplog で拾う"""
    logger.addHandler(caplog.handler)
    return caplog


@pytest.fixture
def s3_client():
    client = MagicMock()
    client.meta.endpoint_url = "https://s3.us-east-1.amazonaws.com"
    return client


@pytest.fixture
def make_config(tmp_path):
    def _make_config(**source_kwargs):
        source_kwargs.setdefault("bucket", "test-bucket")
        return Config(
            logging=LoggingConfig(level="DEBUG"),
            aws=AWSConfig(access_key_id="AKIATEST", secret_access_key="secret"),
            source=SourceConfig(**source_kwargs),
            working_dir=str(tmp_path),
        )
    return _make_config
