from slowapi import Limiter
from slowapi.util import get_remote_address

from ticketsystem.config import get_settings

settings = get_settings()

# Shared by every router; applied to state-changing endpoints only
limiter = Limiter(key_func=get_remote_address)
RATE_LIMIT = settings.rate_limit
