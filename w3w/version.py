"""Wrapper identification sent with every request."""

from __future__ import annotations

__version__ = "0.1.0"

# Prefix of the X-W3W-Wrapper header value: <prefix>/<version>.
WRAPPER_PREFIX = "what3words-python"


def resolve_wrapper_header(version: str = __version__) -> str:
    return f"{WRAPPER_PREFIX}/{version}"
