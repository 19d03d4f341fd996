import json
import logging

from app.core.logging import StructuredFormatter, DevelopmentFormatter, LogContext, get_logger


def make_record(logger_name="taara.test"):
    logger = logging.getLogger(logger_name)
    return logger.makeRecord(logger_name, logging.INFO, __file__, 1, "SMS sent", None, None)


def test_get_logger_uses_app_namespace():
    assert get_logger("app.services.sms_service").name == "taara.app.services.sms_service"


def test_log_context_adds_fields_and_restores_factory():
    original_factory = logging.getLogRecordFactory()

    with LogContext(recipient="+639171234567", notification="adoption_approval"):
        record = make_record()

    assert record.recipient == "+639171234567"
    assert record.notification == "adoption_approval"
    assert logging.getLogRecordFactory() is original_factory


def test_structured_formatter_includes_context():
    with LogContext(recipient="+639171234567", notification="bulk"):
        record = make_record()

    data = json.loads(StructuredFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["message"] == "SMS sent"
    assert data["recipient"] == "+639171234567"
    assert data["notification"] == "bulk"


def test_development_formatter_shows_context():
    with LogContext(recipient="+639171234567", notification="bulk"):
        record = make_record()

    line = DevelopmentFormatter().format(record)

    assert "SMS sent" in line
    assert "[type=bulk, to=+639171234567]" in line
