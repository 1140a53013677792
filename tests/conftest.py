"""
Pytest configuration for the Employee Locator.

Provides fixtures for:
- Settings isolation (cache reset, test-specific overrides)
- Sample employee text and files
- httpx mock transports for the network loader
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generator

import httpx
import pytest

from employee_locator.config import Settings, get_settings

SAMPLE_LINES = [
    "1,Jane,Doe,25,jane@x.com,2020-01-15",
    "2,Tom,Lee,19,tom@x.com,2021-03-01",
    "3,Ava,Smith,21,ava@x.com,2019-07-30",
    "4,Liam,Garcia,20,liam@x.com,2022-11-11",
    "5,Mia,Novak,64,mia@x.com,2001-02-28",
]


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """
    Drop the cached Settings around every test so env overrides take effect.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    """
    Undo configure_logging() calls made by the CLI or logging tests.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        log_level="DEBUG",
        request_timeout_seconds=5.0,
        network_retries=0,
    )


@pytest.fixture
def sample_text() -> str:
    return "\n".join(SAMPLE_LINES) + "\n"


@pytest.fixture
def sample_file(tmp_path: Path, sample_text: str) -> Path:
    path = tmp_path / "employees.csv"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def text_transport() -> Callable[..., httpx.MockTransport]:
    """
    Build an httpx.MockTransport answering every GET with a fixed body/status.
    """

    def _build(body: str, status_code: int = 200) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text=body)

        return httpx.MockTransport(handler)

    return _build
