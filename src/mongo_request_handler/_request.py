from typing import Any, Callable, Dict, Generic, Literal, Mapping, Optional, TypeVar

Query = Dict[str, Any]

BasicEndpoints = Literal[
    "/find",
    "/findOne",
    "/insertOne",
    "/insertMany",
    "/updateOne",
    "/updateMany",
    "/deleteOne",
    "/deleteMany",
]

EndpointT = TypeVar("EndpointT", bound=str)


class MongoDBRequest(Generic[EndpointT]):
    """A single operation against the MongoDB Data API.

    The request carries two query layers. ``base_query`` holds defaults shared
    by every call made with this request (typically the collection name) and
    accumulates: each assignment is merged into what is already there.
    ``query`` holds the parameters of one call and is replaced on assignment.
    ``full_query`` is what gets sent.

    Nothing is validated here; a missing endpoint or an empty query is reported
    when the request is dispatched.

    Custom endpoints can be typed by parametrizing the class:

    Examples:
        ```python
        CustomEndpoints = Literal[BasicEndpoints, "/aggregate"]

        request = MongoDBRequest[CustomEndpoints]()
        request.endpoint = "/aggregate"
        ```

        Shared defaults via subclassing:

        ```python
        class BookCollectionRequest(MongoDBRequest):
            def __init__(self) -> None:
                super().__init__()
                self.base_query = {"collection": "books"}

        request = BookCollectionRequest()
        request.endpoint = "/findOne"
        request.query = {"filter": {"_id": {"$oid": "123"}}}
        request.full_query
        # => {"collection": "books", "filter": {"_id": {"$oid": "123"}}}
        ```
    """

    def __init__(self) -> None:
        self.endpoint: Optional[EndpointT] = None
        self._base_query: Query = {}
        self.query: Query = {}
        self.headers: Dict[str, str] = {}

    @property
    def base_query(self) -> Query:
        return self._base_query

    @base_query.setter
    def base_query(self, new_base_query: Mapping[str, Any]) -> None:
        # Shallow merge: nested values are replaced, not combined.
        self._base_query = {**self._base_query, **new_base_query}

    @property
    def full_query(self) -> Query:
        """``base_query`` overlaid with ``query``; computed on every access."""
        return {**self._base_query, **self.query}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(endpoint={self.endpoint!r}, "
            f"full_query={self.full_query!r})"
        )


def request_factory(
    base_query: Mapping[str, Any],
    *,
    endpoint: Optional[str] = None,
) -> Callable[[], MongoDBRequest[Any]]:
    """Create a constructor for requests that share the same defaults.

    An alternative to subclassing ``MongoDBRequest`` when the only
    specialization needed is a fixed base query.

    Args:
        base_query: Defaults merged into the ``base_query`` of every request.
        endpoint: Optional endpoint preset on every request.

    Returns:
        A callable returning a fresh ``MongoDBRequest`` on each call.

    Examples:
        ```python
        BookRequest = request_factory({"collection": "books"})

        request = BookRequest()
        request.endpoint = "/find"
        request.query = {"limit": 10}
        ```
    """
    defaults = dict(base_query)

    def create() -> MongoDBRequest[Any]:
        request: MongoDBRequest[Any] = MongoDBRequest()
        request.base_query = defaults
        if endpoint:
            request.endpoint = endpoint
        return request

    return create
