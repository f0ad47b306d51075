from __future__ import annotations

import logging

from rift_bot.telemetry import LoggingTelemetry, configure_logging


def test_logging_telemetry_forwards_events(caplog) -> None:
    logger = logging.getLogger("test.telemetry")
    telemetry = LoggingTelemetry(logger=logger)

    with caplog.at_level(logging.INFO, logger="test.telemetry"):
        telemetry.emit("turn_decided", {"turn": 3})

    assert caplog.records[0].getMessage() == "turn_decided"
    assert caplog.records[0].payload == {"turn": 3}


def test_configure_logging_installs_single_handler() -> None:
    configure_logging("debug")
    configure_logging("WARNING")

    logger = logging.getLogger("rift_bot")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False
