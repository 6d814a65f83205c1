"""Forwarding of webhook events to local endpoints."""

from .endpoint import (
    ALL_EVENTS,
    EndpointClient,
    EndpointConfig,
    EndpointResponseHandler,
    EndpointResponseHandlerFunc,
    ResolvedEndpointConfig,
    new_endpoint_client,
)
from .transport import DEFAULT_TIMEOUT, HTTPTransport

__all__ = [
    "ALL_EVENTS",
    "DEFAULT_TIMEOUT",
    "EndpointClient",
    "EndpointConfig",
    "EndpointResponseHandler",
    "EndpointResponseHandlerFunc",
    "HTTPTransport",
    "ResolvedEndpointConfig",
    "new_endpoint_client",
]
