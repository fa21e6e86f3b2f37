"""Immutable value types for the what3words v3 API.

Request-side types (coordinates, boxes, option sets) know how to render
themselves as query parameters; response-side types are decoded from the
JSON bodies with ``from_json``. None of these models have external
dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Coordinates:
    """A latitude/longitude pair.

    Longitude is not range checked: the API accepts wrapped values
    (361 is equivalent to 1).
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.lat}")

    def __str__(self) -> str:
        return self.as_query_param()

    def as_query_param(self) -> str:
        return f"{self.lat:.6f},{self.lng:.6f}"

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Coordinates:
        return cls(lat=float(data["lat"]), lng=float(data["lng"]))


@dataclass(frozen=True, slots=True)
class Square:
    """A rectangle given by its south-west and north-east corners."""

    southwest: Coordinates
    northeast: Coordinates

    def as_query_param(self) -> str:
        return (
            f"{self.southwest.lat:.6f},{self.southwest.lng:.6f},"
            f"{self.northeast.lat:.6f},{self.northeast.lng:.6f}"
        )

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Square:
        return cls(
            southwest=Coordinates.from_json(data["southwest"]),
            northeast=Coordinates.from_json(data["northeast"]),
        )


# Grid sections and clipping use the same shape as a square.
BoundingBox = Square


@dataclass(frozen=True, slots=True)
class Circle:
    center: Coordinates
    radius_km: float

    def as_query_param(self) -> str:
        return f"{self.center.as_query_param()},{self.radius_km:f}"


@dataclass(frozen=True, slots=True)
class ConvertOptions:
    """Options accepted by convert-to-3wa and convert-to-coordinates.

    Attributes:
        language: ISO 639-1 code of the 3 word address language (default en)
        locale: Variant of a language, e.g. ``oo_la``
    """

    language: Optional[str] = None
    locale: Optional[str] = None

    def as_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.language:
            params["language"] = self.language
        if self.locale:
            params["locale"] = self.locale
        return params


@dataclass(frozen=True, slots=True)
class AutoSuggestOptions:
    """Options accepted by autosuggest.

    Only the options that are set are sent. Clipping policies of different
    types combine (results must satisfy all of them); ``focus`` then
    weights what is left towards a location.

    Attributes:
        focus: Prefer results near this location
        clip_to_country: ISO 3166-1 alpha-2 codes to restrict results to
        clip_to_bounding_box: Restrict results to a box
        clip_to_circle: Restrict results to a circle
        clip_to_polygon: Restrict results to a closed polygon (max 25 points)
        language: Fallback language for messy input (required for voice)
        prefer_land: Prefer results on land (server default: True)
        locale: Variant of a language
        n_results: Number of results to return (max 100)
        n_focus_results: How many of the results should be focus-weighted
    """

    focus: Optional[Coordinates] = None
    clip_to_country: Sequence[str] = ()
    clip_to_bounding_box: Optional[BoundingBox] = None
    clip_to_circle: Optional[Circle] = None
    clip_to_polygon: Sequence[Coordinates] = ()
    language: Optional[str] = None
    prefer_land: Optional[bool] = None
    locale: Optional[str] = None
    n_results: Optional[int] = None
    n_focus_results: Optional[int] = None

    def as_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.focus is not None:
            params["focus"] = self.focus.as_query_param()
        if self.clip_to_country:
            params["clip-to-country"] = ",".join(self.clip_to_country)
        if self.clip_to_bounding_box is not None:
            params["clip-to-bounding-box"] = self.clip_to_bounding_box.as_query_param()
        if self.clip_to_circle is not None:
            params["clip-to-circle"] = self.clip_to_circle.as_query_param()
        if self.clip_to_polygon:
            params["clip-to-polygon"] = ",".join(
                point.as_query_param() for point in self.clip_to_polygon
            )
        if self.language:
            params["language"] = self.language
        if self.prefer_land is not None:
            params["prefer-land"] = "true" if self.prefer_land else "false"
        if self.locale:
            params["locale"] = self.locale
        if self.n_results is not None:
            params["n-results"] = str(self.n_results)
        if self.n_focus_results is not None:
            params["n-focus-results"] = str(self.n_focus_results)
        return params


@dataclass(frozen=True, slots=True)
class ConvertResult:
    """JSON response of the convert endpoints."""

    words: str
    coordinates: Coordinates
    square: Square
    country: str = ""
    nearest_place: str = ""
    language: str = ""
    locale: Optional[str] = None
    map_url: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> ConvertResult:
        return cls(
            words=data["words"],
            coordinates=Coordinates.from_json(data["coordinates"]),
            square=Square.from_json(data["square"]),
            country=data.get("country", ""),
            nearest_place=data.get("nearestPlace", ""),
            language=data.get("language", ""),
            locale=data.get("locale"),
            map_url=data.get("map", ""),
        )


@dataclass(frozen=True, slots=True)
class GeoJsonFeature:
    geometry_type: str
    coordinates: Any
    properties: Mapping[str, Any] = field(default_factory=dict)
    bbox: Optional[tuple[float, ...]] = None
    type: str = "Feature"

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> GeoJsonFeature:
        geometry = data.get("geometry") or {}
        bbox = data.get("bbox")
        return cls(
            geometry_type=geometry.get("type", ""),
            coordinates=geometry.get("coordinates"),
            properties=dict(data.get("properties") or {}),
            bbox=tuple(bbox) if bbox is not None else None,
            type=data.get("type", "Feature"),
        )


@dataclass(frozen=True, slots=True)
class GeoJsonFeatureCollection:
    """GeoJSON response of the convert and grid-section endpoints."""

    features: tuple[GeoJsonFeature, ...] = field(default_factory=tuple)
    type: str = "FeatureCollection"

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> GeoJsonFeatureCollection:
        return cls(
            features=tuple(GeoJsonFeature.from_json(f) for f in data.get("features") or ()),
            type=data.get("type", "FeatureCollection"),
        )


@dataclass(frozen=True, slots=True)
class Suggestion:
    """One autosuggest result.

    ``coordinates``, ``square`` and ``map_url`` are only filled by the
    autosuggest-with-coordinates endpoint.
    """

    words: str
    country: str = ""
    nearest_place: str = ""
    rank: int = 0
    language: str = ""
    locale: Optional[str] = None
    distance_to_focus_km: Optional[int] = None
    coordinates: Optional[Coordinates] = None
    square: Optional[Square] = None
    map_url: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Suggestion:
        coordinates = data.get("coordinates")
        square = data.get("square")
        return cls(
            words=data["words"],
            country=data.get("country", ""),
            nearest_place=data.get("nearestPlace", ""),
            rank=int(data.get("rank", 0)),
            language=data.get("language", ""),
            locale=data.get("locale"),
            distance_to_focus_km=data.get("distanceToFocusKm"),
            coordinates=Coordinates.from_json(coordinates) if coordinates else None,
            square=Square.from_json(square) if square else None,
            map_url=data.get("map"),
        )


@dataclass(frozen=True, slots=True)
class AutoSuggestResult:
    suggestions: tuple[Suggestion, ...] = field(default_factory=tuple)

    @property
    def top(self) -> Optional[Suggestion]:
        """Return the best ranked suggestion, if any."""
        return self.suggestions[0] if self.suggestions else None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> AutoSuggestResult:
        return cls(
            suggestions=tuple(Suggestion.from_json(s) for s in data.get("suggestions") or ())
        )


@dataclass(frozen=True, slots=True)
class GridLine:
    start: Coordinates
    end: Coordinates


@dataclass(frozen=True, slots=True)
class GridSection:
    """JSON response of grid-section: the 3m grid lines inside a box."""

    lines: tuple[GridLine, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> GridSection:
        return cls(
            lines=tuple(
                GridLine(
                    start=Coordinates.from_json(line["start"]),
                    end=Coordinates.from_json(line["end"]),
                )
                for line in data.get("lines") or ()
            )
        )


@dataclass(frozen=True, slots=True)
class Language:
    """A 3 word address language.

    Bosnian-Croatian-Montenegrin-Serbian (``oo``) lists its Cyrillic and
    Latin variants in ``locales``.
    """

    code: str
    name: str
    native_name: str
    locales: tuple[Language, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Language:
        return cls(
            code=data["code"],
            name=data.get("name", ""),
            native_name=data.get("nativeName", ""),
            locales=tuple(cls.from_json(loc) for loc in data.get("locales") or ()),
        )


@dataclass(frozen=True, slots=True)
class AvailableLanguages:
    languages: tuple[Language, ...] = field(default_factory=tuple)

    def codes(self) -> list[str]:
        return [language.code for language in self.languages]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> AvailableLanguages:
        return cls(languages=tuple(Language.from_json(lang) for lang in data.get("languages") or ()))
