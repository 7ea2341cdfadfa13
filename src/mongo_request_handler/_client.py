from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from httpx import AsyncClient, Client
from pydantic import ValidationError

from ._config import DatabaseConfig
from ._request import MongoDBRequest
from ._services import (
    create_send_db_request_function,
    create_send_db_request_function_sync,
)
from ._utils import setup_logging
from ._utils.constants import (
    DATA_API_URL_TEMPLATE,
    DEFAULT_REGION,
    ENV_API_KEY,
    ENV_APP_ID,
    ENV_BASE_URL,
    ENV_DATA_SOURCE,
    ENV_DATABASE,
    ENV_REGION,
)
from .models.errors import ConfigurationMissingError

load_dotenv()

_ENV_BY_FIELD = {
    "base_url": f"{ENV_BASE_URL} (or {ENV_APP_ID})",
    "data_source": ENV_DATA_SOURCE,
    "database": ENV_DATABASE,
    "api_key": ENV_API_KEY,
}


def _base_url_from_app_id() -> Optional[str]:
    app_id = env.get(ENV_APP_ID)
    if not app_id:
        return None
    return DATA_API_URL_TEMPLATE.format(
        region=env.get(ENV_REGION) or DEFAULT_REGION, app_id=app_id
    )


def _field_name(loc: Any) -> str:
    for name, info in DatabaseConfig.model_fields.items():
        if loc in (name, info.alias):
            return name
    return str(loc)


class MongoDBDataAPI:
    """Entry point bundling a configuration with ready-to-use dispatchers.

    Every setting falls back to an environment variable (``.env`` files are
    loaded): ``MONGODB_DATA_API_URL``, ``MONGODB_DATA_SOURCE``,
    ``MONGODB_DATABASE`` and ``MONGODB_API_KEY``. When no URL is available but
    ``MONGODB_APP_ID`` is set, the URL of that Data API app is derived, using
    ``MONGODB_REGION`` (default ``ap-southeast-1``).

    Examples:
        ```python
        api = MongoDBDataAPI()

        request = MongoDBRequest()
        request.endpoint = "/insertOne"
        request.query = {"collection": "comments", "document": {"text": "hi"}}

        result = await api.send(request)
        result["insertedId"]
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        data_source: Optional[str] = None,
        database: Optional[str] = None,
        api_key: Optional[str] = None,
        debug: bool = False,
        client: Optional[AsyncClient] = None,
        sync_client: Optional[Client] = None,
    ) -> None:
        base_url_value = base_url or env.get(ENV_BASE_URL) or _base_url_from_app_id()
        data_source_value = data_source or env.get(ENV_DATA_SOURCE)
        database_value = database or env.get(ENV_DATABASE)
        api_key_value = api_key or env.get(ENV_API_KEY)

        try:
            self._config = DatabaseConfig(
                base_url=base_url_value,  # type: ignore
                data_source=data_source_value,  # type: ignore
                database=database_value,  # type: ignore
                api_key=api_key_value,  # type: ignore
            )
        except ValidationError as e:
            field = _field_name(e.errors()[0]["loc"][0])
            raise ConfigurationMissingError(
                field, _ENV_BY_FIELD.get(field, field)
            ) from e

        setup_logging(debug)

        self._send = create_send_db_request_function(self._config, client=client)
        self._send_sync = create_send_db_request_function_sync(
            self._config, client=sync_client
        )

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    async def send(self, request: MongoDBRequest[Any]) -> Any:
        """Send ``request`` and return the decoded JSON response."""
        return await self._send(request)

    def send_sync(self, request: MongoDBRequest[Any]) -> Any:
        return self._send_sync(request)
