"""HTTP transport used to deliver events to the local endpoint."""

from typing import Optional

import requests

DEFAULT_TIMEOUT = 30.0


class HTTPTransport:
    """Send prepared requests through a shared ``requests.Session``.

    The session has no notion of a default timeout, so the transport holds one
    and applies it to every request. Responses are streamed; whoever receives
    a response is responsible for closing it.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Seconds to wait for the connection and for each read
            session: Optional session to share; a new one is created otherwise
        """
        self.timeout = timeout
        self._external_session = session is not None
        self.session = session or requests.Session()

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """Execute ``request`` and return the response.

        Raises:
            requests.exceptions.RequestException: On network failure or timeout
        """
        return self.session.send(request, timeout=self.timeout, stream=True)

    def close(self) -> None:
        if not self._external_session:
            self.session.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HTTPTransport(timeout={self.timeout})"
