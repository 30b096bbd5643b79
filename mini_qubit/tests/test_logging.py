import logging
from io import StringIO

from mini_qubit.logging import configure_logging, get_logger, set_log_level
from mini_qubit.state import Qubit

def test_get_logger_caching_and_namespace():
    a = get_logger("test_module")
    assert a is get_logger("test_module")
    assert a.name == "mini_qubit.test_module"
    assert a.propagate is False

def test_set_log_level_string():
    logger = get_logger("test_module")
    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG
    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING

def test_degenerate_normalize_is_logged():
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        Qubit.from_amplitudes(0, 0)
        assert "normalize skipped" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
