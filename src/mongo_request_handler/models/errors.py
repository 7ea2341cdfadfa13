import json
from typing import Any, Literal, Mapping

MissingParameter = Literal["Endpoint", "Query"]


class MRHError(Exception):
    """Base class for every error raised by mongo-request-handler."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class MRHMissingParameterError(MRHError):
    """Raised when a request is dispatched without a required parameter.

    The endpoint is checked before the query, so a request missing both
    reports ``"Endpoint"``. The request never reaches the network.

    Examples:
        ```python
        try:
            await send_db_request(MongoDBRequest())
        except MRHMissingParameterError as e:
            print(e.parameter)  # => "Endpoint"
        ```
    """

    def __init__(self, parameter: MissingParameter) -> None:
        self.parameter = parameter
        super().__init__(f"Error: Missing required parameter: {parameter}")


class MRHRequestError(MRHError):
    """Raised when the Data API could not be reached.

    Attributes:
        endpoint: The endpoint the request was sent to, e.g. ``"/find"``.
        query: The effective query that was sent (without ``dataSource``
            and ``database``).
        mongo_error_message: The message of the underlying transport error.
    """

    def __init__(
        self, endpoint: str, query: Mapping[str, Any], mongo_error_message: str
    ) -> None:
        self.endpoint = endpoint
        self.query = dict(query)
        self.mongo_error_message = mongo_error_message
        super().__init__(
            f"Error: Database request failed {mongo_error_message}"
            f"\nEndpoint: {endpoint}"
            f"\nQuery: {json.dumps(self.query, default=str)}"
        )


class ConfigurationMissingError(MRHError):
    def __init__(self, field: str, env_var: str) -> None:
        self.field = field
        self.env_var = env_var
        super().__init__(
            f"Missing database configuration: {field}. "
            f"Pass it explicitly or set the {env_var} environment variable."
        )
