from .errors import (
    ConfigurationMissingError,
    MissingParameter,
    MRHError,
    MRHMissingParameterError,
    MRHRequestError,
)
from .results import (
    DeleteOperation,
    Document,
    InsertMultipleDocuments,
    InsertSingleDocument,
    ReadMultipleDocuments,
    ReadSingleDocument,
    UpdateOperation,
)

__all__ = [
    "ConfigurationMissingError",
    "MissingParameter",
    "MRHError",
    "MRHMissingParameterError",
    "MRHRequestError",
    "DeleteOperation",
    "Document",
    "InsertMultipleDocuments",
    "InsertSingleDocument",
    "ReadMultipleDocuments",
    "ReadSingleDocument",
    "UpdateOperation",
]
