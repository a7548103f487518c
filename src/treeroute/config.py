"""Router configuration.

RouterConfig is a frozen dataclass, immutable after creation and passed
explicitly to the pieces that read it.
"""

from dataclasses import dataclass

ROUTE_NAME_KEY = "routeName"


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict_substitution=True)
    """

    # Key under which the matched route name is added to resolved args
    route_name_key: str = ROUTE_NAME_KEY

    # Replace whole ``:token`` positions in one pass instead of
    # repeated first-occurrence string replacement
    strict_substitution: bool = False

    # Keep the compiled pattern on each route between lookups
    cache_patterns: bool = True
