import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from httpx import Client

from httpcall._config import Config
from httpcall._services import ApiCallService

# Ensure local source package (src/httpcall) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


_ENV_VARS = ("HTTPCALL_DEFAULT_TIMEOUT", "HTTPCALL_DEBUG")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clean environment variables before and after each test.

    Values loaded from a .env file bypass monkeypatch, so they are dropped
    explicitly once the test is done.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in _ENV_VARS:
        os.environ.pop(name, None)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def service(config: Config) -> Generator[ApiCallService, None, None]:
    with Client() as client:
        yield ApiCallService(config=config, client=client)
