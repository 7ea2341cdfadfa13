from pydantic import BaseModel, ConfigDict, Field


class DatabaseConfig(BaseModel):
    """Connection settings shared by every request sent through a dispatcher.

    Fields accept both their Python names and the camelCase names used by the
    Data API documentation, so a JSON settings file validates directly.

    Attributes:
        base_url: Root of the Data API, e.g.
            ``https://data.mongodb-api.com/app/data-xxxx/endpoint/data/v1/action``.
            Endpoints are appended to it verbatim.
        data_source: Name of the Atlas cluster, e.g. ``Cluster0``.
        database: Database inside the cluster.
        api_key: Data API key sent in the ``api-key`` header.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
    )

    base_url: str = Field(alias="baseUrl", min_length=1)
    data_source: str = Field(alias="dataSource", min_length=1)
    database: str = Field(min_length=1)
    api_key: str = Field(alias="apiKey", min_length=1, repr=False)
