from ._headers import default_headers, mask_headers, merge_headers
from ._logs import logger, setup_logging
from ._request_spec import RequestSpec

__all__ = [
    "default_headers",
    "logger",
    "mask_headers",
    "merge_headers",
    "RequestSpec",
    "setup_logging",
]
