import pytest
from pydantic import ValidationError
from pytest_httpx import HTTPXMock

from mongo_request_handler import (
    ConfigurationMissingError,
    DatabaseConfig,
    MongoDBDataAPI,
    MongoDBRequest,
)


class TestDatabaseConfig:
    def test_validates_aliases(self, base_url: str):
        config = DatabaseConfig.model_validate(
            {
                "baseUrl": base_url,
                "dataSource": "Cluster0",
                "database": "sample_mflix",
                "apiKey": "key",
            }
        )

        assert config.base_url == base_url
        assert config.data_source == "Cluster0"
        assert config.api_key == "key"

    def test_is_immutable(self, config: DatabaseConfig):
        with pytest.raises(ValidationError):
            config.database = "other"  # type: ignore[misc]

    def test_rejects_empty_values(self, base_url: str):
        with pytest.raises(ValidationError):
            DatabaseConfig(
                base_url=base_url,
                data_source="Cluster0",
                database="",
                api_key="key",
            )

    def test_repr_hides_api_key(self, config: DatabaseConfig, api_key: str):
        assert api_key not in repr(config)


class TestMongoDBDataAPIConfig:
    def test_config_from_constructor(self, base_url: str):
        api = MongoDBDataAPI(
            base_url=base_url,
            data_source="Cluster0",
            database="sample_mflix",
            api_key="1234567890",
        )

        assert api.config.base_url == base_url
        assert api.config.data_source == "Cluster0"
        assert api.config.database == "sample_mflix"
        assert api.config.api_key == "1234567890"

    def test_config_from_env(self, mock_env_vars: dict[str, str]):
        api = MongoDBDataAPI()

        assert api.config.base_url == mock_env_vars["MONGODB_DATA_API_URL"]
        assert api.config.data_source == mock_env_vars["MONGODB_DATA_SOURCE"]
        assert api.config.database == mock_env_vars["MONGODB_DATABASE"]
        assert api.config.api_key == mock_env_vars["MONGODB_API_KEY"]

    def test_constructor_wins_over_env(self, mock_env_vars: dict[str, str]):
        api = MongoDBDataAPI(database="other")

        assert api.config.database == "other"

    def test_base_url_from_app_id(
        self, monkeypatch: pytest.MonkeyPatch, mock_env_vars: dict[str, str]
    ):
        monkeypatch.delenv("MONGODB_DATA_API_URL")
        monkeypatch.setenv("MONGODB_APP_ID", "data-abcde")

        api = MongoDBDataAPI()

        assert api.config.base_url == (
            "https://ap-southeast-1.aws.data.mongodb-api.com"
            "/app/data-abcde/endpoint/data/v1/action"
        )

    def test_base_url_from_app_id_and_region(
        self, monkeypatch: pytest.MonkeyPatch, mock_env_vars: dict[str, str]
    ):
        monkeypatch.delenv("MONGODB_DATA_API_URL")
        monkeypatch.setenv("MONGODB_APP_ID", "data-abcde")
        monkeypatch.setenv("MONGODB_REGION", "eu-west-1")

        api = MongoDBDataAPI()

        assert api.config.base_url.startswith(
            "https://eu-west-1.aws.data.mongodb-api.com/app/data-abcde/"
        )

    @pytest.mark.parametrize(
        "missing, field, env_var",
        [
            ("MONGODB_DATA_API_URL", "base_url", "MONGODB_DATA_API_URL"),
            ("MONGODB_DATA_SOURCE", "data_source", "MONGODB_DATA_SOURCE"),
            ("MONGODB_DATABASE", "database", "MONGODB_DATABASE"),
            ("MONGODB_API_KEY", "api_key", "MONGODB_API_KEY"),
        ],
    )
    def test_missing_config(
        self,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
        missing: str,
        field: str,
        env_var: str,
    ):
        monkeypatch.delenv(missing)

        with pytest.raises(ConfigurationMissingError) as exc_info:
            MongoDBDataAPI()

        assert exc_info.value.field == field
        assert env_var in exc_info.value.env_var
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestMongoDBDataAPISend:
    @pytest.mark.anyio
    async def test_send(
        self,
        httpx_mock: HTTPXMock,
        mock_env_vars: dict[str, str],
        books_request: MongoDBRequest,
        base_url: str,
    ):
        httpx_mock.add_response(url=f"{base_url}/find", json={"documents": []})

        api = MongoDBDataAPI()

        assert await api.send(books_request) == {"documents": []}

    def test_send_sync(
        self,
        httpx_mock: HTTPXMock,
        mock_env_vars: dict[str, str],
        books_request: MongoDBRequest,
        base_url: str,
    ):
        httpx_mock.add_response(url=f"{base_url}/find", json={"documents": []})

        api = MongoDBDataAPI()

        assert api.send_sync(books_request) == {"documents": []}
