"""Configuration for local endpoints."""

from .endpoint_settings import EndpointSettings

__all__ = ["EndpointSettings"]
