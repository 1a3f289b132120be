# =============================================================================
# stripe_tax/pagination.py  —  Sparse option bags for list-style calls
# =============================================================================
#
# Stripe treats "key absent" and "key present but empty" differently, so a
# list call must only carry the options the caller actually supplied.  A
# request with {limit: 3} goes downstream as exactly {"limit": 3}.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

PAGINATION_KEYS = ("limit", "starting_after", "ending_before")


def sparse(source: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Copy only the listed keys that are present and not None."""
    return {key: source[key] for key in keys if source.get(key) is not None}


@dataclass(frozen=True)
class PaginationOptions:
    """Cursor pagination options understood by every Stripe list endpoint."""

    limit: Optional[int] = None
    starting_after: Optional[str] = None
    ending_before: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> "PaginationOptions":
        return cls(**sparse(arguments, PAGINATION_KEYS))

    def to_params(self) -> dict[str, Any]:
        return sparse(
            {
                "limit": self.limit,
                "starting_after": self.starting_after,
                "ending_before": self.ending_before,
            },
            PAGINATION_KEYS,
        )
