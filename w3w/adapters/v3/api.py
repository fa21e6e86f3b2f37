"""what3words v3 API adapter.

One method per endpoint of ``<base_url>/v3``. Each method builds the
query parameters from typed values, sends the request through the
configured HTTP client and decodes the JSON body into a domain model.

Default configuration:
- base URL: https://api.what3words.com
- headers: X-Api-Key and X-W3W-Wrapper
- client: requests session with retries
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

from ...config import DEFAULT_BASE_URL, ApiConfig, get_config
from ...domain.errors import ConfigurationError, ResponseDecodeError
from ...domain.models import (
    AutoSuggestOptions,
    AutoSuggestResult,
    AvailableLanguages,
    BoundingBox,
    ConvertOptions,
    ConvertResult,
    Coordinates,
    GeoJsonFeatureCollection,
    GridSection,
)
from ...ports.http import HttpClientPort
from ...version import resolve_wrapper_header
from ..http.request import join_url, make_get_request
from ..http.session import create_session

HEADER_API_KEY = "X-Api-Key"
HEADER_WRAPPER = "X-W3W-Wrapper"
API_VERSION_PATH = "v3"

T = TypeVar("T")


@dataclass
class V3Api:
    """Client for the what3words v3 endpoints.

    This adapter implements V3ApiPort.

    Attributes:
        api_key: Key sent in the X-Api-Key header
        base_url: Service root; ``/v3`` is appended to it
        headers: Extra headers sent with every request
        client: Transport (defaults to a retrying requests session)
        timeout_seconds: Per-request timeout
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    headers: Dict[str, str] = field(default_factory=dict)
    client: Optional[HttpClientPort] = None
    timeout_seconds: Optional[float] = 10.0

    _logger: logging.Logger = field(init=False, repr=False)
    _client: HttpClientPort = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.headers = {
            HEADER_API_KEY: self.api_key,
            HEADER_WRAPPER: resolve_wrapper_header(),
            **self.headers,
        }
        if self.client is None:
            self.client = create_session()
        self._client = self.client

    @classmethod
    def from_config(cls, config: Optional[ApiConfig] = None) -> V3Api:
        """Build an API client from configuration.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        config = config or get_config().api
        if not config.key:
            raise ConfigurationError(
                "No what3words API key configured (set W3W_API_KEY)",
                setting_name="W3W_API_KEY",
            )
        return cls(
            api_key=config.key,
            base_url=config.base_url,
            headers=dict(config.headers),
            client=create_session(config.max_retries, config.backoff_factor),
            timeout_seconds=config.timeout_seconds,
        )

    @property
    def versioned_url(self) -> str:
        return join_url(self.base_url, API_VERSION_PATH)

    # Configuration setters

    def set_base_url(self, base_url: str) -> None:
        self.base_url = base_url

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def set_header_map(self, headers: Mapping[str, str]) -> None:
        """Replace every header, including the API key and wrapper headers."""
        self.headers = dict(headers)

    def set_client(self, client: HttpClientPort) -> None:
        self.client = self._client = client

    def _get(self, path: str, params: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        self._logger.debug("Calling endpoint", extra={"endpoint": path})
        return make_get_request(
            self._client,
            self.versioned_url,
            path,
            params=params,
            headers=self.headers,
            timeout=self.timeout_seconds,
        )

    def _decode(self, decoder: Callable[[Dict[str, Any]], T], body: Dict[str, Any]) -> T:
        """Build a model from a 200 body.

        Raises:
            ResponseDecodeError: If a field is missing or has the wrong type.
        """
        try:
            return decoder(body)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._logger.warning(
                "Malformed response body", extra={"error": f"{type(e).__name__}: {e}"}
            )
            raise ResponseDecodeError(
                "Response body does not have the expected shape", cause=e, status_code=200
            ) from e

    # Convert

    def _convert_to_3wa(
        self, coordinates: Coordinates, options: Optional[ConvertOptions], format: str
    ) -> Dict[str, Any]:
        params = {"coordinates": coordinates.as_query_param(), "format": format}
        if options is not None:
            params.update(options.as_params())
        return self._get("convert-to-3wa", params)

    def convert_to_3wa(
        self, coordinates: Coordinates, options: Optional[ConvertOptions] = None
    ) -> ConvertResult:
        """Convert a latitude/longitude pair to a three-word address.

        Also returns the country, the bounds of the grid square, a nearby
        place and a link to the map site.
        """
        body = self._convert_to_3wa(coordinates, options, "json")
        return self._decode(ConvertResult.from_json, body)

    def convert_to_3wa_geojson(
        self, coordinates: Coordinates, options: Optional[ConvertOptions] = None
    ) -> GeoJsonFeatureCollection:
        return self._decode(
            GeoJsonFeatureCollection.from_json,
            self._convert_to_3wa(coordinates, options, "geojson"),
        )

    def _convert_to_coordinates(
        self, words: str, options: Optional[ConvertOptions], format: str
    ) -> Dict[str, Any]:
        params = {"words": words, "format": format}
        if options is not None:
            params.update(options.as_params())
        return self._get("convert-to-coordinates", params)

    def convert_to_coordinates(
        self, words: str, options: Optional[ConvertOptions] = None
    ) -> ConvertResult:
        """Convert a three-word address to a latitude/longitude pair."""
        body = self._convert_to_coordinates(words, options, "json")
        return self._decode(ConvertResult.from_json, body)

    def convert_to_coordinates_geojson(
        self, words: str, options: Optional[ConvertOptions] = None
    ) -> GeoJsonFeatureCollection:
        return self._decode(
            GeoJsonFeatureCollection.from_json,
            self._convert_to_coordinates(words, options, "geojson"),
        )

    # AutoSuggest

    def _autosuggest(
        self, path: str, input: str, options: Optional[AutoSuggestOptions]
    ) -> AutoSuggestResult:
        params = {"input": input}
        if options is not None:
            params.update(options.as_params())
        return self._decode(AutoSuggestResult.from_json, self._get(path, params))

    def autosuggest(
        self, input: str, options: Optional[AutoSuggestOptions] = None
    ) -> AutoSuggestResult:
        """Suggest real three-word addresses for a slightly wrong or partial input.

        Corrects spelling errors and misremembered words. Clipping options
        restrict the candidate set first; ``focus`` then ranks what is left
        by distance.
        """
        return self._autosuggest("autosuggest", input, options)

    def autosuggest_with_coordinates(
        self, input: str, options: Optional[AutoSuggestOptions] = None
    ) -> AutoSuggestResult:
        """Same as autosuggest, with coordinates and square filled per suggestion."""
        return self._autosuggest("autosuggest-with-coordinates", input, options)

    # Grid section

    def _grid_section(self, bounding_box: BoundingBox, format: str) -> Dict[str, Any]:
        return self._get(
            "grid-section",
            {"bounding-box": bounding_box.as_query_param(), "format": format},
        )

    def grid_section(self, bounding_box: BoundingBox) -> GridSection:
        """Return the 3m x 3m grid lines inside the box (south-west to north-east)."""
        return self._decode(GridSection.from_json, self._grid_section(bounding_box, "json"))

    def grid_section_geojson(self, bounding_box: BoundingBox) -> GeoJsonFeatureCollection:
        body = self._grid_section(bounding_box, "geojson")
        return self._decode(GeoJsonFeatureCollection.from_json, body)

    # Languages

    def available_languages(self) -> AvailableLanguages:
        """List all three-word address languages with their native names."""
        return self._decode(AvailableLanguages.from_json, self._get("available-languages"))
