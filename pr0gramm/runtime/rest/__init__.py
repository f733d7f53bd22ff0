"""REST runtime abstractions."""

from .http_client import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import NONCE_FIELD, RESTTransport, serialize_params

__all__ = [
    "HTTPClient",
    "NONCE_FIELD",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "serialize_params",
]
