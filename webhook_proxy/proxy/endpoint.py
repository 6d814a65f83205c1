"""Client that forwards webhook events to a local HTTP endpoint."""

import time
from contextlib import closing
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    FrozenSet,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

import requests
from requests.structures import CaseInsensitiveDict

from webhook_proxy.logging_config import discard_logger
from webhook_proxy.metrics import (
    ENDPOINT_POST_DURATION,
    ENDPOINT_POSTS,
    ENDPOINT_RESPONSES,
    status_class,
)
from webhook_proxy.proxy.transport import DEFAULT_TIMEOUT, HTTPTransport

__all__ = [
    "ALL_EVENTS",
    "EndpointClient",
    "EndpointConfig",
    "EndpointResponseHandler",
    "EndpointResponseHandlerFunc",
    "ResolvedEndpointConfig",
    "convert_to_set",
    "new_endpoint_client",
]

ALL_EVENTS = "*"


@runtime_checkable
class EndpointResponseHandler(Protocol):
    """Handles a response from the endpoint."""

    def process_response(self, webhook_id: str, response: requests.Response) -> None:
        ...


class EndpointResponseHandlerFunc:
    """Adapter that lets an ordinary function act as a response handler.

    ``EndpointResponseHandlerFunc(f).process_response(webhook_id, resp)``
    calls ``f(webhook_id, resp)``.
    """

    def __init__(self, func: Callable[[str, requests.Response], Any]):
        self.func = func

    def process_response(self, webhook_id: str, response: requests.Response) -> None:
        self.func(webhook_id, response)

    def __repr__(self) -> str:
        return f"EndpointResponseHandlerFunc({self.func!r})"


def _ignore_response(webhook_id: str, response: requests.Response) -> None:
    pass


@dataclass(frozen=True)
class ResolvedEndpointConfig:
    """Endpoint configuration with every collaborator filled in."""

    http_client: Any
    log: Any
    response_handler: EndpointResponseHandler


@dataclass
class EndpointConfig:
    """Optional configuration parameters of an EndpointClient.

    Attributes:
        http_client: Transport exposing ``send(prepared_request)``; defaults to
            an ``HTTPTransport`` with a 30 second timeout
        log: structlog-style logger; defaults to one that discards everything
        response_handler: Handler or plain callable invoked with every
            received response; defaults to a no-op
    """

    http_client: Optional[Any] = None
    log: Optional[Any] = None
    response_handler: Optional[
        Union[EndpointResponseHandler, Callable[[str, requests.Response], Any]]
    ] = None

    def resolve(self) -> ResolvedEndpointConfig:
        """Return a copy of this configuration with defaults applied."""
        handler = self.response_handler
        if handler is None:
            handler = EndpointResponseHandlerFunc(_ignore_response)
        elif not hasattr(handler, "process_response"):
            handler = EndpointResponseHandlerFunc(handler)

        return ResolvedEndpointConfig(
            http_client=(
                self.http_client
                if self.http_client is not None
                else HTTPTransport(timeout=DEFAULT_TIMEOUT)
            ),
            log=self.log if self.log is not None else discard_logger(),
            response_handler=handler,
        )


class EndpointClient:
    """Client used to POST webhook requests to the local endpoint.

    The URL, connect flag and subscribed events are fixed at construction.
    A client is safe to share between threads as long as its transport is.
    """

    def __init__(
        self,
        url: str,
        connect: bool,
        events: Optional[Iterable[str]],
        config: Optional[EndpointConfig] = None,
    ):
        """Initialize the client.

        Args:
            url: URL the client sends POST requests to
            connect: Whether this client receives Connect events
            events: Event types to accept; ``"*"`` accepts every type
            config: Optional collaborators, see ``EndpointConfig``
        """
        self._url = url
        self._connect = connect
        self._events = convert_to_set(events)
        self._config = (config or EndpointConfig()).resolve()

    @property
    def url(self) -> str:
        return self._url

    @property
    def connect(self) -> bool:
        return self._connect

    @property
    def events(self) -> FrozenSet[str]:
        return self._events

    @property
    def config(self) -> ResolvedEndpointConfig:
        return self._config

    def supports_event_type(self, connect: bool, event_type: str) -> bool:
        """Check whether an event should be delivered to this endpoint.

        Args:
            connect: Whether the event comes from a Connect account
            event_type: Type of the event, e.g. ``"invoice.paid"``

        Returns:
            bool: True if the channel matches and the type is subscribed
        """
        if connect != self._connect:
            return False

        return ALL_EVENTS in self._events or event_type in self._events

    def post(
        self,
        webhook_id: str,
        body: Union[str, bytes],
        headers: Mapping[str, str],
    ) -> None:
        """Send an event to the local endpoint.

        Every received response is passed to the response handler, whatever
        its status code, and closed afterwards.

        Args:
            webhook_id: Identifier passed through to the response handler
            body: Request body, sent unmodified
            headers: Headers to attach to the request

        Raises:
            requests.exceptions.RequestException: If the request cannot be
                built or the endpoint cannot be reached
            Exception: Whatever the response handler raises, after the
                response has been closed
        """
        log = self._config.log
        log.debug(
            "forwarding_event_to_local_endpoint",
            prefix="proxy.EndpointClient.post",
            webhook_id=webhook_id,
            url=self._url,
        )

        try:
            request = self._build_request(body, headers)
        except requests.exceptions.RequestException:
            ENDPOINT_POSTS.labels(outcome="request_error").inc()
            raise

        start_time = time.time()
        try:
            response = self._config.http_client.send(request)
        except requests.exceptions.RequestException as e:
            ENDPOINT_POSTS.labels(outcome="transport_error").inc()
            log.error(
                "failed_to_post_event_to_local_endpoint",
                error=str(e),
                webhook_id=webhook_id,
                url=self._url,
            )
            raise

        with closing(response):
            ENDPOINT_POST_DURATION.observe(time.time() - start_time)
            ENDPOINT_POSTS.labels(outcome="delivered").inc()
            ENDPOINT_RESPONSES.labels(status_class=status_class(response.status_code)).inc()
            self._config.response_handler.process_response(webhook_id, response)

    def _build_request(
        self, body: Union[str, bytes], headers: Mapping[str, str]
    ) -> requests.PreparedRequest:
        if isinstance(body, str):
            body = body.encode("utf-8")

        merged = _merge_headers(headers)
        _check_header_encoding(merged)

        request = requests.Request(
            method="POST",
            url=self._url,
            data=body,
            headers=merged,
        )
        return request.prepare()

    def __repr__(self) -> str:
        return (
            f"EndpointClient(url={self._url!r}, connect={self._connect}, "
            f"events={sorted(self._events)})"
        )


def new_endpoint_client(
    url: str,
    connect: bool,
    events: Optional[Iterable[str]],
    config: Optional[EndpointConfig] = None,
) -> EndpointClient:
    """Return a new EndpointClient with defaults applied to ``config``."""
    return EndpointClient(url, connect, events, config)


def convert_to_set(events: Optional[Iterable[str]]) -> FrozenSet[str]:
    if events is None:
        return frozenset()
    return frozenset(events)


def _merge_headers(headers: Optional[Mapping[str, str]]) -> CaseInsensitiveDict:
    # Names differing only in case are the same HTTP header; fold their values.
    merged = CaseInsensitiveDict()
    for name, value in (headers or {}).items():
        if name in merged:
            merged[name] = f"{merged[name]}, {value}"
        else:
            merged[name] = value
    return merged


def _check_header_encoding(headers: CaseInsensitiveDict) -> None:
    # http.client sends names as ASCII and str values as latin-1.
    for name, value in headers.items():
        try:
            if isinstance(name, str):
                name.encode("ascii")
            if isinstance(value, str):
                value.encode("latin-1")
        except UnicodeEncodeError as e:
            raise requests.exceptions.InvalidHeader(
                f"Header {name!r} cannot be sent on the wire: {e}"
            ) from e
