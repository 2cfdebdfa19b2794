from __future__ import annotations

import os

import pytest


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Keep developer .env files and CONSTRUCT_KIT_* variables out of tests.
    for key in list(os.environ):
        if key.startswith("CONSTRUCT_KIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
