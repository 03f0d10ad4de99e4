"""Centralized constants for internal implementation details.

This module contains constants that are business rules or fixed protocol
details, NOT environment-specific configuration. For environment-specific
settings, use `src/core/config.py` instead.

Categories:
- Vehicle rules: Bounds enforced by the max speed update
- Response envelope: Fixed strings of the HTTP JSON envelope
- Query parsing: Separators used in query parameters

Example:
    >>> from src.core.constants import MAX_SPEED_UPPER_BOUND
    >>> 0 <= 180.0 <= MAX_SPEED_UPPER_BOUND
    True
"""

# =============================================================================
# Vehicle Rules
# =============================================================================

MAX_SPEED_LOWER_BOUND: float = 0.0
"""Lowest max speed accepted by the max speed update (inclusive)."""

MAX_SPEED_UPPER_BOUND: float = 500.0
"""Highest max speed accepted by the max speed update (inclusive)."""


# =============================================================================
# Response Envelope
# =============================================================================

SUCCESS_MESSAGE: str = "Success"
"""Message carried by every successful response envelope."""


# =============================================================================
# Query Parsing
# =============================================================================

RANGE_SEPARATOR: str = "-"
"""Separator of "min-max" pairs in the dimensions query parameters."""
