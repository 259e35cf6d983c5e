import logging

from src.utils.logging_config import PrettyFormatter, setup_logger


def _record(level, msg="hello"):
    return logging.LogRecord("test", level, "bot.py", 10, msg, None, None)


def test_pretty_formatter_plain_output():
    text = PrettyFormatter(colored=False).format(_record(logging.WARNING))

    assert "WARN" in text
    assert text.endswith("hello")
    assert "\033[" not in text


def test_pretty_formatter_shows_location_on_debug():
    text = PrettyFormatter(colored=False).format(_record(logging.DEBUG))

    assert "[bot.py:10]" in text


def test_setup_logger_writes_log_file(tmp_path):
    logger = setup_logger(str(tmp_path))
    try:
        logging.getLogger("test").info("started")
        for handler in logger.handlers:
            handler.flush()

        (log_file,) = tmp_path.glob("bot_*.log")
        assert "started" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
