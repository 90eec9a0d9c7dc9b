import json

import pytest
import structlog

from src.infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_structlog():
    yield
    structlog.reset_defaults()


def test_json_output_carries_level_and_timestamp(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("INFO", "json")

    structlog.get_logger("test").info("item_listed", item_id=7)

    record = json.loads(capsys.readouterr().out.strip())
    assert record["event"] == "item_listed"
    assert record["item_id"] == 7
    assert record["level"] == "info"
    assert "timestamp" in record


def test_events_below_level_are_dropped(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning", "json")

    structlog.get_logger("test").info("item_listed")
    structlog.get_logger("test").warning("data_store_slow")

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "data_store_slow"


def test_unknown_level_falls_back_to_info(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("LOUD", "console")

    structlog.get_logger("test").debug("hidden")
    structlog.get_logger("test").info("shown")

    out = capsys.readouterr().out
    assert "shown" in out
    assert "hidden" not in out
