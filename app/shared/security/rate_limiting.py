"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on the file route.
Each application gets its own Limiter so that limits are not shared
between app instances. The limit is applied by decorating the endpoint.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address


def build_limiter(enabled: bool = True) -> Limiter:
    """Create a Limiter keyed on the client address.

    Args:
        enabled: When False, requests are never limited.

    Returns:
        A Limiter to be stored on app.state.limiter.
    """
    return Limiter(key_func=get_remote_address, enabled=enabled)
