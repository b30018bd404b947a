from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch):
    # Settings tests must not see the developer's MEDDIR_* overrides.
    for key in list(os.environ):
        if key.startswith("MEDDIR_"):
            monkeypatch.delenv(key, raising=False)
