"""Typed errors raised by the what3words client.

The local pattern rules never raise; everything here comes from the
remote layer (transport, decoding, API error bodies) or from bad
configuration.

All errors inherit from W3WError and can optionally wrap a root cause
exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Error codes returned in the ``error.code`` field of the v3 API."""

    BAD_COORDINATES = "BadCoordinates"
    BAD_LANGUAGE = "BadLanguage"
    BAD_WORDS = "BadWords"
    BAD_INPUT = "BadInput"
    BAD_N_RESULTS = "BadNResults"
    BAD_N_FOCUS_RESULTS = "BadNFocusResults"
    BAD_FOCUS = "BadFocus"
    BAD_CLIP_TO_CIRCLE = "BadClipToCircle"
    BAD_CLIP_TO_BOUNDING_BOX = "BadClipToBoundingBox"
    BAD_CLIP_TO_POLYGON = "BadClipToPolygon"
    BAD_CLIP_TO_COUNTRY = "BadClipToCountry"
    BAD_PREFER_LAND = "BadPreferLand"
    BAD_LOCALE = "BadLocale"
    BAD_BOUNDING_BOX = "BadBoundingBox"
    BAD_BOUNDING_BOX_TOO_BIG = "BadBoundingBoxTooBig"
    MISSING_WORDS = "MissingWords"
    MISSING_INPUT = "MissingInput"
    MISSING_COORDINATES = "MissingCoordinates"
    MISSING_BOUNDING_BOX = "MissingBoundingBox"
    INVALID_KEY = "InvalidKey"
    MISSING_KEY = "MissingKey"
    QUOTA_EXCEEDED = "QuotaExceeded"
    INTERNAL_SERVER_ERROR = "InternalServerError"


@dataclass
class W3WError(Exception):
    """Base error for the what3words client.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ApiError(W3WError):
    """The API answered with a non-success status.

    Attributes:
        code: Value of ``error.code`` in the response body (empty if absent)
        status_code: HTTP status of the response
    """

    code: str = ""
    status_code: Optional[int] = None

    def __str__(self) -> str:
        return f"api: got error response '{self.code}' with message '{self.message}'"

    @property
    def error_code(self) -> Optional[ErrorCode]:
        """Return the code as an ErrorCode, or None if it is not a known one."""
        try:
            return ErrorCode(self.code)
        except ValueError:
            return None


@dataclass
class TransportError(W3WError):
    """The request never produced a response (DNS, TLS, timeout, ...).

    Attributes:
        url: URL that was being requested
    """

    url: str = ""


@dataclass
class ResponseDecodeError(W3WError):
    """The response body was not the JSON document we expected.

    Attributes:
        status_code: HTTP status of the response
    """

    status_code: Optional[int] = None


@dataclass
class ConfigurationError(W3WError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
