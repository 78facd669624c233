from __future__ import annotations

import logging

import pytest

from oddments import log as oddments_log
from oddments.config import get_settings
from oddments.records import Record


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point every ODDMENTS_* path into tmp_path and reset cached settings."""
    monkeypatch.setenv("ODDMENTS_DATA_FILE", str(tmp_path / "data" / "items.csv"))
    monkeypatch.setenv("ODDMENTS_EXPORT_FILE", str(tmp_path / "data" / "items.json"))
    monkeypatch.setenv("ODDMENTS_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("ODDMENTS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ODDMENTS_FILE_LOGGING", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    pkg = logging.getLogger(oddments_log.PACKAGE_LOGGER)
    for h in list(oddments_log._installed):
        pkg.removeHandler(h)
        h.close()
    oddments_log._installed.clear()
    pkg.setLevel(logging.NOTSET)


@pytest.fixture()
def csv_path(tmp_path):
    return tmp_path / "data" / "items.csv"


@pytest.fixture()
def sky_spoon():
    return Record("id-1", "Sky Spoon", "Tools", "Scoops clouds")


@pytest.fixture()
def echo_jar():
    return Record("id-2", "Echo Jar", "Containers", "Stores echoes")
