"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings live here (DRY).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

SEARCH_LIMIT = "120/minute"
DELETE_LIMIT = "30/minute"

limit_search = limiter.limit(SEARCH_LIMIT)
limit_delete = limiter.limit(DELETE_LIMIT)
