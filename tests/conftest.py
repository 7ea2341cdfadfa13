import sys
from pathlib import Path

import pytest

from mongo_request_handler import DatabaseConfig, MongoDBRequest

# Ensure local source package (src/mongo_request_handler) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "MONGODB_DATA_API_URL",
        "MONGODB_APP_ID",
        "MONGODB_REGION",
        "MONGODB_DATA_SOURCE",
        "MONGODB_DATABASE",
        "MONGODB_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://data.mongodb-api.com/app/data-test/endpoint/data/v1/action"


@pytest.fixture
def data_source() -> str:
    return "Cluster0"


@pytest.fixture
def database() -> str:
    return "sample_mflix"


@pytest.fixture
def api_key() -> str:
    return "secret-api-key"


@pytest.fixture
def config(base_url: str, data_source: str, database: str, api_key: str) -> DatabaseConfig:
    return DatabaseConfig(
        base_url=base_url,
        data_source=data_source,
        database=database,
        api_key=api_key,
    )


@pytest.fixture
def mock_env_vars(
    monkeypatch: pytest.MonkeyPatch,
    base_url: str,
    data_source: str,
    database: str,
    api_key: str,
) -> dict[str, str]:
    """Export a complete configuration through the environment."""
    env_vars = {
        "MONGODB_DATA_API_URL": base_url,
        "MONGODB_DATA_SOURCE": data_source,
        "MONGODB_DATABASE": database,
        "MONGODB_API_KEY": api_key,
    }
    for name, value in env_vars.items():
        monkeypatch.setenv(name, value)
    return env_vars


@pytest.fixture
def books_request() -> MongoDBRequest:
    request: MongoDBRequest = MongoDBRequest()
    request.endpoint = "/find"
    request.query = {"collection": "books"}
    return request
