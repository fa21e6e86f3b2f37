"""Services layer - Client facade.

Available services:
- W3WService: v3 API access plus local three-word-address rules
"""

from .service import W3WService, new_service

__all__ = ["W3WService", "new_service"]
