"""
Custom exceptions for the webhook proxy.
"""


class WebhookProxyError(Exception):
    """Base exception for webhook proxy errors."""

    pass


class ConfigurationError(WebhookProxyError, ValueError):
    """Raised when endpoint settings are missing or malformed."""

    pass
