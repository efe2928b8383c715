# ethos/integration/auth/models.py
from __future__ import annotations

import time
from dataclasses import dataclass

# Ethos does not report an expiry with the token; it currently issues
# five-minute tokens.
TOKEN_LIFETIME_SECONDS = 5 * 60
EXPIRY_LEEWAY_SECONDS = 30


@dataclass(frozen=True)
class CachedToken:
    token: str
    expires: float

    @classmethod
    def issued(cls, token: str, now: float) -> "CachedToken":
        return cls(token=token, expires=now + TOKEN_LIFETIME_SECONDS)

    def is_valid(
        self, now: float | None = None, leeway: int = EXPIRY_LEEWAY_SECONDS
    ) -> bool:
        """
        Returns True if token is still usable.
        `leeway` avoids edge-of-expiry races during in-flight requests.
        """
        if now is None:
            now = time.time()
        return self.expires - leeway > now
