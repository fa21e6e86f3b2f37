"""V3 API port - the remote what3words service.

This protocol is the contract the service facade depends on, including
the autosuggest call used to confirm that an address-shaped string is a
real, allocated three-word address.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import (
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
    from .http import HttpClientPort


class V3ApiPort(Protocol):
    """Port for the what3words v3 API.

    Implementation: adapters/v3/api.py (V3Api)

    Every endpoint raises ApiError when the service answers with an error,
    TransportError when no answer arrives and ResponseDecodeError when the
    answer is not the expected JSON.
    """

    def set_base_url(self, base_url: str) -> None:
        ...

    def set_header(self, key: str, value: str) -> None:
        ...

    def set_header_map(self, headers: Mapping[str, str]) -> None:
        ...

    def set_client(self, client: HttpClientPort) -> None:
        ...

    def convert_to_3wa(
        self, coordinates: Coordinates, options: Optional[ConvertOptions] = None
    ) -> ConvertResult:
        """Convert a latitude/longitude pair to a three-word address."""
        ...

    def convert_to_3wa_geojson(
        self, coordinates: Coordinates, options: Optional[ConvertOptions] = None
    ) -> GeoJsonFeatureCollection:
        ...

    def convert_to_coordinates(
        self, words: str, options: Optional[ConvertOptions] = None
    ) -> ConvertResult:
        """Convert a three-word address to a latitude/longitude pair."""
        ...

    def convert_to_coordinates_geojson(
        self, words: str, options: Optional[ConvertOptions] = None
    ) -> GeoJsonFeatureCollection:
        ...

    def autosuggest(
        self, input: str, options: Optional[AutoSuggestOptions] = None
    ) -> AutoSuggestResult:
        """Suggest real three-word addresses for a full or partial input.

        A partial input needs the first two words and at least the first
        character of the third (``filled.count.s``).
        """
        ...

    def autosuggest_with_coordinates(
        self, input: str, options: Optional[AutoSuggestOptions] = None
    ) -> AutoSuggestResult:
        ...

    def grid_section(self, bounding_box: BoundingBox) -> GridSection:
        """Return the 3m x 3m grid lines inside a bounding box."""
        ...

    def grid_section_geojson(self, bounding_box: BoundingBox) -> GeoJsonFeatureCollection:
        ...

    def available_languages(self) -> AvailableLanguages:
        """List every supported three-word address language."""
        ...
