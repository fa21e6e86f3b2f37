"""Domain layer - Value types and errors.

This module contains immutable request/response models and typed
errors used throughout the client. No external dependencies.
"""

from .errors import (
    ApiError,
    ConfigurationError,
    ErrorCode,
    ResponseDecodeError,
    TransportError,
    W3WError,
)
from .models import (
    AutoSuggestOptions,
    AutoSuggestResult,
    AvailableLanguages,
    BoundingBox,
    Circle,
    ConvertOptions,
    ConvertResult,
    Coordinates,
    GeoJsonFeature,
    GeoJsonFeatureCollection,
    GridLine,
    GridSection,
    Language,
    Square,
    Suggestion,
)

__all__ = [
    # Models
    "Coordinates",
    "Square",
    "BoundingBox",
    "Circle",
    "ConvertOptions",
    "AutoSuggestOptions",
    "ConvertResult",
    "GeoJsonFeature",
    "GeoJsonFeatureCollection",
    "Suggestion",
    "AutoSuggestResult",
    "GridLine",
    "GridSection",
    "Language",
    "AvailableLanguages",
    # Errors
    "W3WError",
    "ApiError",
    "ErrorCode",
    "TransportError",
    "ResponseDecodeError",
    "ConfigurationError",
]
