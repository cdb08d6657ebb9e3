# tests/utils/test_logging.py
import logging

from pagecraft.utils.logging import api_logger


def test_reserved_extra_keys_are_prefixed(caplog):
    with caplog.at_level(logging.INFO, logger="pagecraft.api"):
        api_logger.info("Exporting", extra={"filename": "contract.pdf", "document_id": "doc-1"})

    record = caplog.records[-1]
    assert record.getMessage() == "Exporting"
    assert record.extra_filename == "contract.pdf"
    assert record.document_id == "doc-1"


def test_records_point_at_the_caller(caplog):
    with caplog.at_level(logging.DEBUG, logger="pagecraft.api"):
        api_logger.warning("Page not found")

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.module == "test_logging"
