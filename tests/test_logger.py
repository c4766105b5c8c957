from datetime import datetime

from gdogewallet.logger import (
    LOG_FILE_NAME,
    OLD_LOG_FILE_NAME,
    WalletLogger,
    format_record,
)


def test_format_record():
    when = datetime(2018, 1, 2, 3, 4, 5, 678000)
    assert format_record(when, "info", "hello") == "2018-01-02 03:04:05.678 [info] hello"


def test_messages_written_to_file(tmp_path):
    with WalletLogger(tmp_path, debug=True) as logger:
        logger.debug("dbg")
        logger.info("started")
        logger.warning("careful")
        logger.critical("broken")
    lines = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
    assert [line.split(" ", 2)[2] for line in lines] == [
        "[debug] dbg",
        "[info] started",
        "[warning] careful",
        "[critical] broken",
    ]


def test_debug_dropped_without_debug_flag(tmp_path):
    with WalletLogger(tmp_path, debug=False) as logger:
        logger.debug("hidden")
        logger.info("shown")
    content = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "hidden" not in content
    assert "[info] shown" in content


def test_messages_echoed_to_stderr(tmp_path, capsys):
    with WalletLogger(tmp_path) as logger:
        logger.warning("careful")
    assert "[warning] careful" in capsys.readouterr().err


def test_appends_to_existing_file(tmp_path):
    (tmp_path / LOG_FILE_NAME).write_text("earlier\n", encoding="utf-8")
    with WalletLogger(tmp_path) as logger:
        logger.info("later")
    lines = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
    assert lines[0] == "earlier"
    assert lines[1].endswith("[info] later")


def test_old_log_file_renamed(tmp_path):
    (tmp_path / OLD_LOG_FILE_NAME).write_text("old line\n", encoding="utf-8")
    with WalletLogger(tmp_path) as logger:
        logger.info("new")
    assert not (tmp_path / OLD_LOG_FILE_NAME).exists()
    content = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert content.startswith("old line\n")


def test_unopenable_log_file_reported(tmp_path, capsys):
    logger = WalletLogger(tmp_path / "missing" / "dir")
    logger.info("still works")
    logger.close()
    err = capsys.readouterr().err
    assert "[Logger] Can't open log file" in err
    assert "[info] still works" in err


def test_nothing_written_after_close(tmp_path):
    with WalletLogger(tmp_path) as logger:
        logger.info("before")
    logger.info("after")
    content = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "before" in content
    assert "after" not in content