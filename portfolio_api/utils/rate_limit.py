import math
import time
from dataclasses import dataclass
from datetime import timedelta

from limits import RateLimitItem, RateLimitItemPerSecond
from limits.storage import MemoryStorage, Storage
from limits.strategies import FixedWindowRateLimiter


@dataclass(frozen=True)
class RateLimitPolicy:
    name: str
    limit: int
    window: timedelta

    @property
    def item(self) -> RateLimitItem:
        return RateLimitItemPerSecond(self.limit, int(self.window.total_seconds()))

    @property
    def window_minutes(self) -> int:
        return int(self.window.total_seconds() // 60)


@dataclass(frozen=True)
class RateLimitStatus:
    allowed: bool
    limit: int
    remaining: int
    reset_in: int

    @property
    def headers(self) -> dict[str, str]:
        return {
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": str(self.reset_in),
        }


class RateLimiter:
    """
    Fixed window request counter keyed by policy and client.

    Every hit is counted, including rejected ones, so a client that keeps sending requests
    stays blocked until its window expires.
    """

    def __init__(self, storage: Storage | None = None) -> None:
        self._storage = storage or MemoryStorage()
        self._strategy = FixedWindowRateLimiter(self._storage)

    def hit(self, policy: RateLimitPolicy, key: str) -> RateLimitStatus:
        item = policy.item
        allowed = self._strategy.hit(item, policy.name, key)
        stats = self._strategy.get_window_stats(item, policy.name, key)
        return RateLimitStatus(
            allowed=allowed,
            limit=policy.limit,
            remaining=stats.remaining,
            reset_in=max(0, math.ceil(stats.reset_time - time.time())),
        )

    def reset(self) -> None:
        self._storage.reset()
