"""Request timeout policy.

Maps logical route keys (``"products.list"``, ``"reviews.create"``) to one of
four duration buckets. The table is built once at import time and exposed as
a read-only mapping.

Usage:
    from dealort.util.timeouts import get_timeout_for_route

    get_timeout_for_route("products.list")  # 600_000
    get_timeout_for_route("unknown.route")  # 300_000 (MODERATE)
"""

from types import MappingProxyType
from typing import Final, Mapping


class Timeouts:
    """Timeout buckets in milliseconds."""

    # Aggregations and large joined lists
    HEAVY: Final[int] = 10 * 60 * 1000

    # Uploads and list operations with joins
    MODERATE_HEAVY: Final[int] = 7 * 60 * 1000

    # CRUD with recalculations
    MODERATE: Final[int] = 5 * 60 * 1000

    # Simple operations
    LIGHT: Final[int] = 3 * 60 * 1000


WILDCARD = "*"

# Iteration order is significant for wildcard entries: first match wins.
ROUTE_TIMEOUTS: Mapping[str, int] = MappingProxyType(
    {
        # Heavy
        "analytics.getOverviewAnalytics": Timeouts.HEAVY,
        "products.list": Timeouts.HEAVY,
        "comments.list": Timeouts.HEAVY,
        "products.getBySlug": Timeouts.HEAVY,
        # Moderate-heavy
        "reviews.list": Timeouts.MODERATE_HEAVY,
        "products.syncOrganizationMetadata": Timeouts.MODERATE_HEAVY,
        # Moderate
        "reviews.create": Timeouts.MODERATE,
        "reviews.update": Timeouts.MODERATE,
        "reviews.delete": Timeouts.MODERATE,
        "comments.create": Timeouts.MODERATE,
        "comments.update": Timeouts.MODERATE,
        "comments.delete": Timeouts.MODERATE,
        "comments.toggleLike": Timeouts.MODERATE,
        "products.create": Timeouts.MODERATE,
        "products.update": Timeouts.MODERATE,
        "products.follow": Timeouts.MODERATE,
        "products.unfollow": Timeouts.MODERATE,
        "products.toggleImpression": Timeouts.MODERATE,
        # Light
        "healthCheck": Timeouts.LIGHT,
        "reports.create": Timeouts.LIGHT,
        "updateUserImage": Timeouts.LIGHT,
        "privateData": Timeouts.LIGHT,
    }
)


def matches_route_pattern(route_path: str, pattern: str) -> bool:
    """Check whether a route key matches a pattern.

    ``"*"`` matches everything, a trailing ``"*"`` is a prefix match, any
    other pattern must match exactly.

    Args:
        route_path: Route key or URL path to check
        pattern: Pattern to match against

    Returns:
        True if the route matches the pattern
    """
    if pattern == WILDCARD:
        return True
    if pattern.endswith(WILDCARD):
        return route_path.startswith(pattern[:-1])
    return route_path == pattern


def get_timeout_for_route(
    route_path: str, table: Mapping[str, int] = ROUTE_TIMEOUTS
) -> int:
    """Resolve the timeout for a route key.

    Lookup order: exact entry, then the first wildcard entry (in table
    order) whose prefix matches, then ``Timeouts.MODERATE``. Never raises.

    Args:
        route_path: Dot-separated route key
        table: Timeout table to consult

    Returns:
        Timeout in milliseconds
    """
    exact = table.get(route_path)
    if exact is not None:
        return exact

    for pattern, timeout_ms in table.items():
        if pattern.endswith(WILDCARD) and matches_route_pattern(route_path, pattern):
            return timeout_ms

    return Timeouts.MODERATE
