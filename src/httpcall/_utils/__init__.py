from ._auth import apply_auth_headers, encode_basic_auth
from ._decoding import decode_response
from ._encoding import ContentType, encode_body
from ._errors import handle_transport_errors, parse_error_body, status_error
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._retry import is_transient_error, transient_retrying

__all__ = [
    "ContentType",
    "RequestSpec",
    "apply_auth_headers",
    "decode_response",
    "encode_basic_auth",
    "encode_body",
    "handle_transport_errors",
    "is_transient_error",
    "parse_error_body",
    "setup_logging",
    "status_error",
    "transient_retrying",
]
