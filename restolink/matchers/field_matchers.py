"""
Field-level matchers used to decide whether two restaurant records describe
the same place. Each matcher carries its applicability test, its comparison
and its threshold.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional

from restolink.config import ADDRESS_THRESHOLD, REFERENCE_THRESHOLD
from restolink.models import RestaurantRecord
from restolink.similarity import edit_distance_similarity, jaccard_similarity


class MatchOutcome(str, Enum):
    """Result of applying one matcher to one pair of records."""
    MATCH = "match"
    NO_MATCH = "no_match"
    NOT_APPLICABLE = "not_applicable"


class FieldMatcher(ABC):
    """Base class for field matchers."""

    name: ClassVar[str]
    threshold: Optional[float] = None

    @abstractmethod
    def applies(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        """Whether both records carry the field this matcher needs."""

    @abstractmethod
    def matches(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        """Compare two records. Only meaningful when `applies` is True."""

    def evaluate(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> MatchOutcome:
        if not self.applies(driving, candidate):
            return MatchOutcome.NOT_APPLICABLE
        if self.matches(driving, candidate):
            return MatchOutcome.MATCH
        return MatchOutcome.NO_MATCH


@dataclass(frozen=True)
class PhoneMatcher(FieldMatcher):
    """
    Substring containment between phone strings.

    A record may hold several numbers joined by a delimiter, so containment is
    accepted in either direction. Numbers are not parsed or validated, so a
    short or truncated phone string is contained in many longer ones; checking
    both directions widens that false-positive risk.
    """
    name: ClassVar[str] = "phone"

    def applies(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        return bool(driving.phone) and bool(candidate.phone)

    def matches(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        return candidate.phone in driving.phone or driving.phone in candidate.phone


@dataclass(frozen=True)
class WebsiteMatcher(FieldMatcher):
    """Exact, case-sensitive URL equality."""
    name: ClassVar[str] = "website"

    def applies(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        return bool(driving.website) and bool(candidate.website)

    def matches(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        return driving.website == candidate.website


def _reference_tokens(reference: str) -> List[str]:
    return [token for token in reference.split("-") if token]


@dataclass(frozen=True)
class ReferenceMatcher(FieldMatcher):
    """Jaccard similarity of the slug tokens, strictly above the threshold."""
    name: ClassVar[str] = "reference"
    threshold: float = REFERENCE_THRESHOLD

    def applies(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        return bool(driving.reference) and bool(candidate.reference)

    def similarity(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> float:
        return jaccard_similarity(
            _reference_tokens(driving.reference),
            _reference_tokens(candidate.reference),
        )

    def matches(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        return self.similarity(driving, candidate) > self.threshold


@dataclass(frozen=True)
class AddressMatcher(FieldMatcher):
    """
    Street, city and zip must each be more similar than the threshold
    (normalized Levenshtein). Country is ignored.
    """
    name: ClassVar[str] = "address"
    threshold: float = ADDRESS_THRESHOLD
    compared_fields: ClassVar[tuple] = ("street", "city", "zip")

    def applies(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        if driving.address is None or candidate.address is None:
            return False
        return all(
            getattr(driving.address, part) and getattr(candidate.address, part)
            for part in self.compared_fields
        )

    def matches(self, driving: RestaurantRecord, candidate: RestaurantRecord) -> bool:
        return all(
            edit_distance_similarity(
                getattr(driving.address, part), getattr(candidate.address, part)
            ) > self.threshold
            for part in self.compared_fields
        )
