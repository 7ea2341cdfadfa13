from typing import Any, Awaitable, Callable, Optional

from httpx import AsyncClient, Client, RequestError, Response
from pydantic_core import to_json

from .._config import DatabaseConfig
from .._request import MongoDBRequest
from .._utils import RequestSpec, logger, mask_headers, merge_headers
from .._utils.constants import BODY_DATA_SOURCE, BODY_DATABASE
from ..models.errors import MRHMissingParameterError, MRHRequestError

SendDBRequestFunction = Callable[[MongoDBRequest[Any]], Awaitable[Any]]
SendDBRequestFunctionSync = Callable[[MongoDBRequest[Any]], Any]


def _request_spec(config: DatabaseConfig, request: MongoDBRequest[Any]) -> RequestSpec:
    if not request.endpoint:
        raise MRHMissingParameterError("Endpoint")

    full_query = request.full_query
    if not full_query:
        raise MRHMissingParameterError("Query")

    body = {
        BODY_DATA_SOURCE: config.data_source,
        BODY_DATABASE: config.database,
        **full_query,
    }

    return RequestSpec(
        method="POST",
        url=config.base_url + request.endpoint,
        endpoint=request.endpoint,
        query=full_query,
        headers=merge_headers(config.api_key, request.headers),
        # datetimes become ISO 8601 strings, pydantic models become objects
        content=to_json(body),
    )


def _log_request(spec: RequestSpec) -> None:
    logger.debug(f"Request: {spec.method} {spec.url}")
    logger.debug(f"HEADERS: {mask_headers(spec.headers)}")


def _request_error(spec: RequestSpec, error: RequestError) -> MRHRequestError:
    logger.warning(f"Database request to {spec.endpoint} failed: {error!r}")
    return MRHRequestError(spec.endpoint, spec.query, str(error) or repr(error))


def create_send_db_request_function(
    config: DatabaseConfig,
    *,
    client: Optional[AsyncClient] = None,
) -> SendDBRequestFunction:
    """Create the coroutine function used to send requests to the Data API.

    Every call validates the request, sends exactly one POST and returns the
    decoded JSON body. The HTTP status code is not inspected: an error body
    returned by the Data API is handed back like any other result.

    Args:
        config: Connection settings applied to every request.
        client: Optional client used for all calls. It is borrowed, never
            closed. Without it each call opens its own client with no timeout.

    Returns:
        ``send_db_request(request)``.

    Raises:
        MRHMissingParameterError: When the endpoint is unset, or when the
            effective query is empty. The endpoint is checked first.
        MRHRequestError: When sending the request or reading the response
            fails, e.g. a refused connection or an undecodable body.

    Examples:
        ```python
        send_db_request = create_send_db_request_function(config)

        request = MongoDBRequest()
        request.endpoint = "/find"
        request.query = {"collection": "books"}

        result = await send_db_request(request)
        result["documents"]
        ```
    """

    async def _post(spec: RequestSpec, http: AsyncClient) -> Response:
        return await http.post(spec.url, headers=spec.headers, content=spec.content)

    async def send_db_request(request: MongoDBRequest[Any]) -> Any:
        spec = _request_spec(config, request)
        _log_request(spec)

        try:
            if client is not None:
                response = await _post(spec, client)
            else:
                async with AsyncClient(timeout=None) as owned_client:
                    response = await _post(spec, owned_client)
        except RequestError as e:
            raise _request_error(spec, e) from e

        logger.debug(f"Response: {response.status_code} {spec.url}")
        return response.json()

    return send_db_request


def create_send_db_request_function_sync(
    config: DatabaseConfig,
    *,
    client: Optional[Client] = None,
) -> SendDBRequestFunctionSync:
    """Blocking counterpart of ``create_send_db_request_function``.

    Validation order, request shape and errors are identical.
    """

    def _post(spec: RequestSpec, http: Client) -> Response:
        return http.post(spec.url, headers=spec.headers, content=spec.content)

    def send_db_request(request: MongoDBRequest[Any]) -> Any:
        spec = _request_spec(config, request)
        _log_request(spec)

        try:
            if client is not None:
                response = _post(spec, client)
            else:
                with Client(timeout=None) as owned_client:
                    response = _post(spec, owned_client)
        except RequestError as e:
            raise _request_error(spec, e) from e

        logger.debug(f"Response: {response.status_code} {spec.url}")
        return response.json()

    return send_db_request
