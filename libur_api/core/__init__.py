"""
Core module
"""
from libur_api.core.errors import (
    LiburError,
    InvalidInput,
    FetchError,
    ParseError,
)
from libur_api.core.request import (
    request_id_var,
    get_request_id as get_current_request_id,
    set_request_id,
    generate_request_id,
    configure_logger_with_request_id,
)

__all__ = [
    "LiburError",
    "InvalidInput",
    "FetchError",
    "ParseError",
    "request_id_var",
    "get_current_request_id",
    "set_request_id",
    "generate_request_id",
    "configure_logger_with_request_id",
]
