"""Build and send MongoDB Data API requests.

Examples:
    ```python
    from mongo_request_handler import (
        DatabaseConfig,
        MongoDBRequest,
        create_send_db_request_function,
    )

    send_db_request = create_send_db_request_function(
        DatabaseConfig(
            base_url="https://data.mongodb-api.com/app/data-xxxx/endpoint/data/v1/action",
            data_source="Cluster0",
            database="sample_mflix",
            api_key="...",
        )
    )

    request = MongoDBRequest()
    request.endpoint = "/find"
    request.query = {"collection": "comments", "limit": 5}

    result = await send_db_request(request)
    ```
"""

from ._client import MongoDBDataAPI
from ._config import DatabaseConfig
from ._request import BasicEndpoints, MongoDBRequest, Query, request_factory
from ._services import (
    SendDBRequestFunction,
    SendDBRequestFunctionSync,
    create_send_db_request_function,
    create_send_db_request_function_sync,
)
from .models import results as RequestResult
from .models.errors import (
    ConfigurationMissingError,
    MRHError,
    MRHMissingParameterError,
    MRHRequestError,
)

__all__ = [
    "BasicEndpoints",
    "ConfigurationMissingError",
    "create_send_db_request_function",
    "create_send_db_request_function_sync",
    "DatabaseConfig",
    "MongoDBDataAPI",
    "MongoDBRequest",
    "MRHError",
    "MRHMissingParameterError",
    "MRHRequestError",
    "Query",
    "request_factory",
    "RequestResult",
    "SendDBRequestFunction",
    "SendDBRequestFunctionSync",
]
