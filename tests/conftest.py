from __future__ import annotations

import pytest

from objstore.common import config
from objstore.common.config import get_settings

SETTINGS_ENV = (
    "S3_ENDPOINT_URL",
    "S3_REGION",
    "S3_ACCESS_KEY_ID",
    "S3_SECRET_ACCESS_KEY",
    "S3_USE_SSL",
    "S3_ADDRESSING_STYLE",
    "S3_BUCKET",
    "ENABLE_METRICS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    for name in SETTINGS_ENV:
        # set first so teardown also removes values loaded from ENV_FILE
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config, "ENV_FILE", tmp_path / ".env")
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
