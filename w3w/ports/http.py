"""HTTP client port - the transport the API adapter sends requests through.

``requests.Session`` satisfies this protocol, and so does any fake that
records calls, which is how the adapters are tested.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class HttpResponsePort(Protocol):
    status_code: int
    text: str

    def json(self) -> Any:
        ...


class HttpClientPort(Protocol):
    """Port for issuing GET requests.

    Implementation: requests.Session (see adapters/http/session.py)
    """

    def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> HttpResponsePort:
        """Send a GET request.

        Args:
            url: Absolute URL without the query string.
            params: Query parameters.
            headers: Request headers.
            timeout: Seconds to wait for the server.

        Returns:
            The response, whatever its status code.
        """
        ...
