"""Endpoint settings module."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv

from webhook_proxy.exceptions import ConfigurationError
from webhook_proxy.proxy.endpoint import ALL_EVENTS, EndpointClient, EndpointConfig
from webhook_proxy.proxy.transport import DEFAULT_TIMEOUT, HTTPTransport

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _parse_events(events: Union[str, List[str], None]) -> List[str]:
    # A blank value counts as unset.
    if events is None or (isinstance(events, str) and not events.strip()):
        return [ALL_EVENTS]
    if isinstance(events, str):
        return [event.strip() for event in events.split(",") if event.strip()]
    if not isinstance(events, (list, tuple)) or not all(
        isinstance(event, str) for event in events
    ):
        raise ConfigurationError(f"Invalid endpoint events: {events!r}")
    return list(events)


def _parse_bool(value: Union[str, bool]) -> bool:
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(f"Invalid endpoint connect flag: {value!r}")
    return value.strip().lower() in _TRUE_VALUES


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid endpoint timeout: {value!r}") from e
    if timeout <= 0:
        raise ConfigurationError(f"Endpoint timeout must be positive, got {timeout}")
    return timeout


@dataclass
class EndpointSettings:
    """Settings describing one local endpoint.

    Attributes:
        url: Endpoint URL events are posted to
        connect: Whether the endpoint receives Connect events
        events: Event types to forward; ``"*"`` forwards everything
        timeout: Request timeout in seconds
    """

    url: str
    connect: bool = False
    events: List[str] = field(default_factory=lambda: [ALL_EVENTS])
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "EndpointSettings":
        """Create settings from a dictionary, ignoring unknown keys.

        Raises:
            ConfigurationError: If ``url`` is missing or ``timeout`` is invalid
        """
        values = {k: v for k, v in config_dict.items() if k in cls.__dataclass_fields__}
        if not values.get("url"):
            raise ConfigurationError("Endpoint url is required")
        if "connect" in values:
            values["connect"] = _parse_bool(values["connect"])
        if "events" in values:
            values["events"] = _parse_events(values["events"])
        if "timeout" in values:
            values["timeout"] = _parse_timeout(values["timeout"])
        return cls(**values)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "EndpointSettings":
        """Create settings from environment variables.

        Environment Variables:
            ENDPOINT_URL: Required endpoint URL
            ENDPOINT_CONNECT: Optional connect flag (true/false)
            ENDPOINT_EVENTS: Optional comma separated event types
            ENDPOINT_TIMEOUT: Optional request timeout in seconds

        Args:
            env_file: Optional ``.env`` file loaded before reading the environment

        Raises:
            ConfigurationError: If ENDPOINT_URL is missing or a value is malformed
        """
        if env_file:
            load_dotenv(env_file)

        url = os.getenv("ENDPOINT_URL")
        if not url:
            raise ConfigurationError("ENDPOINT_URL environment variable is required")

        return cls(
            url=url,
            connect=_parse_bool(os.getenv("ENDPOINT_CONNECT", "false")),
            events=_parse_events(os.getenv("ENDPOINT_EVENTS")),
            timeout=_parse_timeout(os.getenv("ENDPOINT_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )

    def build_client(
        self,
        log: Optional[Any] = None,
        response_handler: Optional[Any] = None,
        http_client: Optional[Any] = None,
    ) -> EndpointClient:
        """Create an EndpointClient for these settings."""
        if http_client is None:
            http_client = HTTPTransport(timeout=self.timeout)
        return EndpointClient(
            self.url,
            self.connect,
            self.events,
            EndpointConfig(
                http_client=http_client,
                log=log,
                response_handler=response_handler,
            ),
        )
