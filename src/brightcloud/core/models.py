"""Core data models for the BrightCloud client.

This module defines the caller credential and the immutable value objects
returned by the web service operations.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from brightcloud.core.constants import ReputationTier


# ============================================================================
# Credential Model
# ============================================================================

@dataclass(frozen=True)
class Credential:
    """OAuth consumer key/secret pair.

    Supplied once at client construction and never mutated. The secret is
    excluded from repr so it does not leak into logs or tracebacks.
    """
    key: str
    secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.key or not self.secret:
            raise ValueError("Credential key and secret must be non-empty")


# ============================================================================
# Category Models
# ============================================================================

@dataclass(frozen=True)
class CategoryInfo:
    """A BrightCloud category.

    Lookups only populate id and confidence. Name and group come from
    the category list (see ``join_categories``).
    """
    id: int
    name: str = ""
    group: str = ""                         # Security, Legal Liability, IT Resources, Productivity
    confidence: int = 0                     # 1-100

    def with_details(self, name: str, group: str) -> "CategoryInfo":
        return replace(self, name=name, group=group)


# ============================================================================
# Lookup Result Model
# ============================================================================

@dataclass(frozen=True)
class UrlLookupResult:
    """Categorization and reputation data for a URL."""
    status: int
    status_message: str
    uri: str
    categories: tuple[CategoryInfo, ...] = ()
    reputation_index: int = 0               # 0-100
    all_same_category: bool = False         # Subdomains share one category

    @property
    def reputation_tier(self) -> Optional[ReputationTier]:
        """Risk tier for the reputation index, None if the index is out of range."""
        try:
            return ReputationTier.from_index(self.reputation_index)
        except ValueError:
            return None

    @property
    def category_ids(self) -> list[int]:
        return [category.id for category in self.categories]


# ============================================================================
# Heartbeat Model
# ============================================================================

@dataclass(frozen=True)
class HeartBeatResult:
    """Web service status and CDN update information."""
    status: int
    status_message: str
    update_cdn: bool = False
    update_rtu: bool = False
    update_time: str = ""
    cdn_uris: tuple[str, ...] = ()          # Document order
