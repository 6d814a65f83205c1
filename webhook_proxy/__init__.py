"""Webhook proxy module."""

from .config import EndpointSettings
from .exceptions import ConfigurationError, WebhookProxyError
from .proxy import (
    EndpointClient,
    EndpointConfig,
    EndpointResponseHandler,
    EndpointResponseHandlerFunc,
    HTTPTransport,
    new_endpoint_client,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "EndpointClient",
    "EndpointConfig",
    "EndpointResponseHandler",
    "EndpointResponseHandlerFunc",
    "EndpointSettings",
    "HTTPTransport",
    "WebhookProxyError",
    "new_endpoint_client",
]
