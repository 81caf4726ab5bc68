import logging

from tvkit.errors import BatchStoreError, ContextError, HTTPStatusError, log_and_return_error
from tvkit.logging import set_logger


def test_log_and_return_error_keeps_context_and_original():
    original = RuntimeError("original error")

    err = log_and_return_error(original, "test context")

    assert isinstance(err, ContextError)
    assert "test context" in str(err)
    assert "original error" in str(err)
    assert err.original is original
    assert err.__cause__ is original


def test_log_and_return_error_logs(restore_log, caplog):
    set_logger(logging.getLogger("test.errors"))
    with caplog.at_level(logging.INFO, logger="test.errors"):
        log_and_return_error(ValueError("bad"), "parsing")
    assert "parsing: bad" in caplog.text


def test_log_and_return_error_without_logger(restore_log):
    set_logger(None)
    assert "ctx" in str(log_and_return_error(OSError("x"), "ctx"))


def test_http_status_error_message():
    err = HTTPStatusError(418, "http://srv/tea")
    assert "418" in str(err)
    assert err.url == "http://srv/tea"


def test_batch_error_reports_first_failure():
    first, second = OSError("one"), OSError("two")
    err = BatchStoreError([("set", "a", first), ("delete", "b", second)])
    assert str(err).startswith("failed to set key a: one")
    assert "+1 more" in str(err)
