"""Unit tests for loguru sink configuration."""

from loguru import logger

from bca_assistant.logging_setup import configure_logging


def test_file_sink_receives_messages(tmp_path):
    log_file = tmp_path / "assistant.log"
    configure_logging("DEBUG", str(log_file))

    logger.debug("gateway ready")
    logger.remove()

    assert "gateway ready" in log_file.read_text(encoding="utf-8")


def test_level_filters_file_sink(tmp_path):
    log_file = tmp_path / "assistant.log"
    configure_logging("WARNING", str(log_file))

    logger.info("hidden")
    logger.warning("shown")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "shown" in text
    assert "hidden" not in text
