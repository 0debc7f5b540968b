"""Shared slowapi limiter instance.

Kept out of main.py so route modules can apply per-endpoint limits via
``@limiter.limit()`` without circular imports. Every route also gets the
coarse ``api_rate_limit`` default; ``/login`` carries the strict
``login_rate_limit``.

Clients are keyed by the raw peer address. Forwarding headers are not
trusted, so a client cannot pick its own rate-limit bucket.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from banking.config import get_settings

limiter = Limiter(key_func=get_remote_address, default_limits=[get_settings().api_rate_limit])

# Limit string applied to the login route
LOGIN_RATE_LIMIT = get_settings().login_rate_limit
