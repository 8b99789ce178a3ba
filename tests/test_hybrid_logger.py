"""
Tests for HybridLogger output formatting and level filtering.
"""

import logging

from hybridLogger import HybridLogger


def test_file_log_has_class_column(tmp_path):
    with HybridLogger("FileTest", log_dir=str(tmp_path)) as hybrid:
        hybrid.get_class_logger("SequenceEngine").info("Game started")

    log_files = list(tmp_path.glob("FileTest_*.log"))
    assert len(log_files) == 1
    content = log_files[0].read_text(encoding="utf-8")
    assert "[INFO] [SequenceEngine] Game started" in content
    # File output never carries color codes
    assert "\033[" not in content


def test_level_filtering(capsys):
    hybrid = HybridLogger("LevelTest", log_dir=None)
    log = hybrid.get_class_logger("Quiet", logging.WARNING)
    log.info("hidden")
    log.warning("shown")
    hybrid.cleanup()

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_derived_logger_shares_handlers(capsys):
    hybrid = HybridLogger("DerivedTest", log_dir=None)
    state_log = hybrid.get_main_logger(logging.DEBUG).create_class_logger("IdleState")
    state_log.debug("entered")
    hybrid.cleanup()

    assert "[IdleState] entered" in capsys.readouterr().out


def test_error_with_exception_adds_type(capsys):
    hybrid = HybridLogger("ErrorTest", log_dir=None)
    log = hybrid.get_class_logger("Main")
    try:
        raise KeyError("missing")
    except KeyError as e:
        log.error("Lookup failed", exception=e)
    hybrid.cleanup()

    out = capsys.readouterr().out
    assert "Lookup failed | Type: KeyError" in out


def test_class_loggers_are_cached():
    hybrid = HybridLogger("CacheTest", log_dir=None)
    assert hybrid.get_class_logger("A") is hybrid.get_class_logger("A")
    hybrid.cleanup()
