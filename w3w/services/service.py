"""what3words service - the facade most callers use.

Bundles the v3 API client with the local pattern rules, and combines the
two in ``is_valid_3wa``: a cheap local full-match first, then a single
autosuggest call to confirm the address really exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from ..adapters.v3 import V3Api
from ..config import AppConfig, get_config
from ..domain.errors import W3WError
from ..domain.models import AutoSuggestOptions
from ..matching import DEFAULT_MATCHER, AddressPatternMatcher
from ..ports.api import V3ApiPort
from ..ports.http import HttpClientPort


@dataclass
class W3WService:
    """Entry point to the what3words API and the local address rules.

    Example:
        svc = new_service("your-api-key")
        svc.find_possible_3wa("meet me at ///filled.count.soap")
        svc.v3().convert_to_coordinates("filled.count.soap")

    Attributes:
        v3_api: Client for the v3 endpoints
        matcher: Local three-word-address rules
    """

    v3_api: V3ApiPort
    matcher: AddressPatternMatcher = DEFAULT_MATCHER

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> W3WService:
        """Create a service from configuration (environment variables).

        Raises:
            ConfigurationError: If no API key is configured.
        """
        config = config or get_config()
        return cls(v3_api=V3Api.from_config(config.api))

    def v3(self) -> V3ApiPort:
        return self.v3_api

    def find_possible_3wa(self, text: str) -> List[str]:
        """Return every substring of text shaped like a three-word address."""
        return self.matcher.find_candidates(text)

    def is_possible_3wa(self, text: str) -> bool:
        """Check text is shaped like a three-word address."""
        return self.matcher.is_full_match(text)

    def did_you_mean(self, text: str) -> bool:
        """Check text is almost a three-word address (wrong separator)."""
        return self.matcher.is_likely_typo(text)

    def is_valid_3wa(self, text: str) -> bool:
        """Check text is a real three-word address.

        Only strings that pass ``is_possible_3wa`` reach the network. The
        address is valid when the top autosuggest result is exactly the
        input (leading slashes removed). Remote failures count as invalid.
        """
        if not self.is_possible_3wa(text):
            return False

        candidate = text.lstrip("/")
        try:
            result = self.v3_api.autosuggest(candidate, AutoSuggestOptions(n_results=1))
        except W3WError as e:
            self._logger.warning(
                "Could not confirm three-word address",
                extra={"candidate": candidate, "error": str(e)},
            )
            return False

        top = result.top
        is_valid = top is not None and top.words == candidate
        self._logger.debug(
            "Three-word address confirmation",
            extra={"candidate": candidate, "valid": is_valid},
        )
        return is_valid


def new_service(
    api_key: str,
    *,
    base_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[HttpClientPort] = None,
    v3_api: Optional[V3ApiPort] = None,
) -> W3WService:
    """Create a service for an API key.

    Args:
        api_key: what3words API key.
        base_url: Custom service root, e.g. a self-hosted enterprise server.
        headers: Extra headers sent with every request.
        client: Custom HTTP client (anything with a requests-like ``get``).
        v3_api: Preconfigured v3 client; when given, the other options are
            applied to it.

    Returns:
        A configured W3WService.
    """
    if v3_api is None:
        api: V3ApiPort = V3Api(api_key=api_key, client=client)
    else:
        api = v3_api
        if client is not None:
            api.set_client(client)
    if base_url is not None:
        api.set_base_url(base_url)
    for key, value in (headers or {}).items():
        api.set_header(key, value)
    return W3WService(v3_api=api)
