"""Tests for structlog configuration and the events the registry emits."""

from __future__ import annotations

import logging
from datetime import date

import pytest
import structlog
from structlog.testing import capture_logs

from roadregistry.core.logging import _level_from_name, configure_logging
from roadregistry.models.person import PersonDraft
from roadregistry.persistence.record_store import RecordStore
from roadregistry.registry import RoadRegistry
from tests.fakes import MemoryFileStore


@pytest.fixture
def restore_structlog():
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)


def test_level_names():
    assert _level_from_name("debug") == logging.DEBUG
    assert _level_from_name("WARNING") == logging.WARNING
    assert _level_from_name("nonsense") == logging.INFO


@pytest.mark.parametrize("environment, renderer", [
    ("prod", structlog.processors.JSONRenderer),
    ("dev", structlog.dev.ConsoleRenderer),
])
def test_configure_picks_renderer(restore_structlog, environment, renderer):
    configure_logging(environment=environment, log_level="INFO")
    assert isinstance(structlog.get_config()["processors"][-1], renderer)


class TestRegistryEvents:
    @pytest.fixture
    def registry(self):
        return RoadRegistry(RecordStore(MemoryFileStore()), today=lambda: date(2026, 10, 19))

    def test_success_logged_at_info(self, registry):
        with capture_logs() as logs:
            registry.register(PersonDraft(
                identity="23ab!#XYKZ", first_name="John", last_name="Doe",
                address="12|Main Street|Melbourne|Victoria|Australia", birthdate="15-04-1995",
            ))
        events = [e for e in logs if e["event"] == "operation_succeeded"]
        assert events[0]["log_level"] == "info"
        assert events[0]["operation"] == "register"
        assert events[0]["identity"] == "23ab!#XYKZ"

    def test_rejection_logged_at_warning(self, registry):
        with capture_logs() as logs:
            registry.record_offenses("23ab!#XYKZ", [("01-03-2026", 2)])
        events = [e for e in logs if e["event"] == "operation_rejected"]
        assert events[0]["log_level"] == "warning"
        assert events[0]["outcome"] == "NOT_FOUND"
