"""Client for the what3words v3 API.

This package exposes the v3 endpoints as typed methods and recognises
strings shaped like three-word addresses locally, without a network call:

    from w3w import new_service

    svc = new_service("your-api-key")
    svc.find_possible_3wa("meet me at ///filled.count.soap")  # ['filled.count.soap']
    svc.v3().convert_to_coordinates("filled.count.soap").coordinates
"""

from .domain.errors import ApiError, ErrorCode, W3WError
from .matching import AddressPatternMatcher, did_you_mean, find_possible_3wa, is_possible_3wa
from .services import W3WService, new_service
from .version import __version__

__all__ = [
    "W3WService",
    "new_service",
    "AddressPatternMatcher",
    "find_possible_3wa",
    "is_possible_3wa",
    "did_you_mean",
    "W3WError",
    "ApiError",
    "ErrorCode",
    "__version__",
]
