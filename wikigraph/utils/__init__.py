"""
Utility modules for web crawling
"""

from .rate_limiter import (
    PacingPolicy,
    NoPacing,
    FixedDelayPacing,
    MinIntervalPacing,
    TokenBucketPacing,
    create_pacing
)

__all__ = [
    'PacingPolicy',
    'NoPacing',
    'FixedDelayPacing',
    'MinIntervalPacing',
    'TokenBucketPacing',
    'create_pacing'
]
