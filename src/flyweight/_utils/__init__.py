from ._errors import handle_errors
from ._logs import log_response, setup_logging
from ._request_spec import RequestSpec, build_headers, encode_body
from ._ssl_context import get_httpx_client_kwargs
from ._url import build_url

__all__ = [
    "build_headers",
    "build_url",
    "encode_body",
    "get_httpx_client_kwargs",
    "handle_errors",
    "log_response",
    "RequestSpec",
    "setup_logging",
]
