from __future__ import annotations

import pytest

from helpers import ErrorSink


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("AD_LAD_PLUGIN", "AD_LAD_DUMMY_AD_DURATION", "AD_LAD_DUMMY_INIT_DELAY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def error_sink():
    return ErrorSink()
