"""
Rate limiting configuration and setup.

Uses slowapi, keyed by client address. Write endpoints carry an
explicit limit from settings.rate_limit_write.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from bookstore.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
)
