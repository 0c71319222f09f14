"""Unit tests for logging setup."""

import logging

from assetdash.config import Settings
from assetdash.infrastructure.logging.log_config import level_from_name, setup_logging


def test_level_from_name():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("WARNING") == logging.WARNING
    assert level_from_name("chatty") == logging.INFO


def test_setup_logging_applies_group_levels():
    settings = Settings(log_level_sql="ERROR", log_level_remote="DEBUG", log_level_store="WARNING")

    applied = setup_logging(settings)

    assert applied["sqlalchemy.engine"] == logging.ERROR
    assert logging.getLogger("assetdash.infrastructure.remote").level == logging.DEBUG
    assert logging.getLogger("assetdash.application.services").level == logging.WARNING
