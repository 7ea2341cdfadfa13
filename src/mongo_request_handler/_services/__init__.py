from ._dispatch import (
    SendDBRequestFunction,
    SendDBRequestFunctionSync,
    create_send_db_request_function,
    create_send_db_request_function_sync,
)

__all__ = [
    "SendDBRequestFunction",
    "SendDBRequestFunctionSync",
    "create_send_db_request_function",
    "create_send_db_request_function_sync",
]
