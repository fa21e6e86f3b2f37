"""HTTP adapters - requests-based transport and JSON request helper."""

from .request import join_url, make_get_request
from .session import create_session

__all__ = ["create_session", "join_url", "make_get_request"]
