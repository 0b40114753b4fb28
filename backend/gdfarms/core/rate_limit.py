"""
slowapi limiter construction.

Each application gets its own Limiter so its storage and on/off switch follow
the settings it was built with.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from gdfarms.config import Settings


def create_limiter(app_settings: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address, enabled=app_settings.RATE_LIMIT_ENABLED
    )
