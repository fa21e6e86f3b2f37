"""V3 API adapters - Implementations of V3ApiPort.

Available implementations:
- V3Api: what3words public (or self-hosted) v3 REST API
"""

from .api import HEADER_API_KEY, HEADER_WRAPPER, V3Api

__all__ = ["V3Api", "HEADER_API_KEY", "HEADER_WRAPPER"]
