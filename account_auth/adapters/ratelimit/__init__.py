"""Rate limiter adapters - RateLimiter implementations."""

from .memory import SlidingWindowRateLimiter
from .redis_limiter import RedisSlidingWindowRateLimiter

__all__ = ["RedisSlidingWindowRateLimiter", "SlidingWindowRateLimiter"]
