"""
Tests for logging setup
"""

import logging

from porkctl.utils.logger import ROOT_LOGGER_NAME, get_logger, setup_logger


def test_get_logger_nests_under_package():
    """Module loggers live under the porkctl hierarchy"""
    assert get_logger("porkctl.api.porkbun_client").name == "porkctl.api.porkbun_client"
    assert get_logger("__main__").name == "porkctl.__main__"


def test_console_goes_to_stderr(capsys):
    logger = setup_logger(level="INFO")
    get_logger("porkctl.tests").info("hello from the tests")

    captured = capsys.readouterr()
    assert "hello from the tests" in captured.err
    assert captured.out == ""
    assert logger.name == ROOT_LOGGER_NAME


def test_reconfiguring_replaces_handlers():
    setup_logger(level="INFO")
    logger = setup_logger(level="DEBUG")
    assert len(logger.handlers) == 1


def test_file_handler_records_debug(tmp_path):
    log_file = tmp_path / "logs" / "porkctl.log"
    setup_logger(level="WARNING", log_file=log_file)

    get_logger("porkctl.tests").debug("written to file only")
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        handler.flush()

    assert "written to file only" in log_file.read_text(encoding="utf-8")

    # Release the file handle before tmp_path is removed
    setup_logger(level="WARNING")
