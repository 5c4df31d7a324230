import sys
from pathlib import Path

import pytest

from flyweight import Config, LoggingStyle

# Ensure local source package (src/flyweight) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "FLYWEIGHT_TIMEOUT",
        "FLYWEIGHT_LOG_STYLE",
        "FLYWEIGHT_USER_AGENT",
        "FLYWEIGHT_DISABLE_SSL",
        "FLYWEIGHT_CA_BUNDLE",
        "FLYWEIGHT_CA_DIR",
        "SSL_CERT_FILE",
        "SSL_CERT_DIR",
        "REQUESTS_CA_BUNDLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com"


@pytest.fixture
def ships_url(base_url: str) -> str:
    return f"{base_url}/ships"


@pytest.fixture
def config() -> Config:
    return Config(user_agent="flyweight-tests/1.0", log_style=LoggingStyle.NORMAL)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
