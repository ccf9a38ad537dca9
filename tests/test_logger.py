# File: tests/test_logger.py
import logging

from a11y_scout.logger import LOGGER_NAME, configure, logger, scan_log, scan_log_path


def test_scan_log_path_is_sibling_of_output(tmp_path):
    assert scan_log_path(tmp_path / "run1") == tmp_path / "run1.log"


def test_scan_log_does_not_create_output_dir(tmp_path):
    output = tmp_path / "reports" / "run1"

    with scan_log(output) as path:
        logger.info("inside the scan")

    assert path == tmp_path / "reports" / "run1.log"
    assert "inside the scan" in path.read_text(encoding="utf-8")
    assert not output.exists()


def test_scan_log_handler_removed_after_block(tmp_path):
    before = list(logging.getLogger(LOGGER_NAME).handlers)

    with scan_log(tmp_path / "run1") as path:
        pass
    logger.info("after the scan")

    assert logging.getLogger(LOGGER_NAME).handlers == before
    assert "after the scan" not in path.read_text(encoding="utf-8")


def test_configure_replaces_handlers(tmp_path):
    lg = logging.getLogger(LOGGER_NAME)
    saved_handlers, saved_level = list(lg.handlers), lg.level
    try:
        assert configure(level="DEBUG", log_file=tmp_path / "logs" / "a11y.log") is lg
        assert len(lg.handlers) == 2
        assert lg.level == logging.DEBUG
        assert lg.propagate is False
        lg.debug("debug line")
        assert "debug line" in (tmp_path / "logs" / "a11y.log").read_text(encoding="utf-8")
    finally:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            lg.addHandler(handler)
        lg.setLevel(saved_level)
