"""Ports layer - Abstract interfaces (Protocols) for the client.

Ports define the contracts between the service facade and the external
systems it drives, so that the transport and the remote API can be
swapped for fakes in tests.
"""

from .api import V3ApiPort
from .http import HttpClientPort, HttpResponsePort

__all__ = [
    "V3ApiPort",
    "HttpClientPort",
    "HttpResponsePort",
]
