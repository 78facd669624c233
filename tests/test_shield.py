from __future__ import annotations

import logging

import pytest

from oddments.errors import CatalogError, InternalError, NotFoundError, TooLongError, WriteError
from oddments.shield import guard


def test_result_passes_through():
    assert guard(lambda: 42, "unused") == 42


def test_none_result_passes_through():
    assert guard(lambda: None, "unused") is None


@pytest.mark.parametrize("err", [NotFoundError("missing"), TooLongError("too long"), WriteError("Failed to write file")])
def test_application_errors_are_reraised_unchanged(err, caplog):
    def action():
        raise err

    with caplog.at_level(logging.WARNING, logger="oddments.shield"):
        with pytest.raises(CatalogError) as ei:
            guard(action, "safe")

    assert ei.value is err
    assert [r.levelno for r in caplog.records] == [logging.WARNING]


def test_unexpected_errors_are_shielded(caplog):
    def action():
        raise RuntimeError("secret path /etc/shadow")

    with caplog.at_level(logging.WARNING, logger="oddments.shield"):
        with pytest.raises(InternalError) as ei:
            guard(action, "X")

    assert str(ei.value) == "X"
    assert ei.value.__cause__ is None
    assert ei.value.__suppress_context__
    assert "secret" not in str(ei.value)

    [rec] = caplog.records
    assert rec.levelno == logging.ERROR
    assert rec.exc_info is not None
    assert isinstance(rec.exc_info[1], RuntimeError)


def test_custom_logger_is_used(caplog):
    log = logging.getLogger("oddments.test.custom")

    def action():
        raise KeyError("k")

    with caplog.at_level(logging.ERROR, logger="oddments.test.custom"):
        with pytest.raises(InternalError):
            guard(action, "safe", log=log)

    assert caplog.records[0].name == "oddments.test.custom"
