"""Field matchers, registry, linkage engine and result assembly."""
from restolink.matchers.field_matchers import (
    AddressMatcher,
    FieldMatcher,
    MatchOutcome,
    PhoneMatcher,
    ReferenceMatcher,
    WebsiteMatcher,
)
from restolink.matchers.registry import MatcherRegistry, build_default_registry
from restolink.matchers.linkage_engine import LinkageEngine
from restolink.matchers.result_assembler import ClaimPolicy, link_restaurants

__all__ = [
    "AddressMatcher",
    "FieldMatcher",
    "MatchOutcome",
    "PhoneMatcher",
    "ReferenceMatcher",
    "WebsiteMatcher",
    "MatcherRegistry",
    "build_default_registry",
    "LinkageEngine",
    "ClaimPolicy",
    "link_restaurants",
]
