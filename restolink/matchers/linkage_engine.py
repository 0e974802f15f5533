"""
Candidate search for a single driving record.

Scans are linear and short-circuit on the first qualifying candidate, in
candidate-list order. When several candidates satisfy the same matcher the
first one wins; that is deterministic but says nothing about which candidate
is the "true" counterpart. Matching is directional and not guaranteed to be
symmetric.
"""
from typing import Optional, Sequence, Tuple
from loguru import logger

from restolink.matchers.field_matchers import FieldMatcher, MatchOutcome
from restolink.matchers.registry import MatcherRegistry
from restolink.models import RestaurantRecord


class LinkageEngine:
    """Resolves driving records against a candidate collection using a matcher registry."""

    def __init__(self, registry: MatcherRegistry):
        self.registry = registry

    @staticmethod
    def _scan(
        matcher: FieldMatcher,
        driving: RestaurantRecord,
        candidates: Sequence[RestaurantRecord],
    ) -> Optional[RestaurantRecord]:
        for candidate in candidates:
            if matcher.evaluate(driving, candidate) is MatchOutcome.MATCH:
                return candidate
        return None

    def resolve(
        self,
        driving: RestaurantRecord,
        candidates: Sequence[RestaurantRecord],
        matcher_id: str,
    ) -> Optional[RestaurantRecord]:
        """
        Return the first candidate the given matcher applies to and accepts.

        Args:
            driving (RestaurantRecord): Record to find a counterpart for.
            candidates (Sequence[RestaurantRecord]): Records searched in order.
            matcher_id (str): Id of a registered matcher.

        Returns:
            Optional[RestaurantRecord]: The matching candidate, or None.
        """
        matcher = self.registry.get(matcher_id)
        return self._scan(matcher, driving, candidates)

    def resolve_chain(
        self,
        driving: RestaurantRecord,
        candidates: Sequence[RestaurantRecord],
    ) -> Optional[Tuple[str, RestaurantRecord]]:
        """
        Try each matcher of the registry chain in priority order and stop at
        the first one that links the driving record to a candidate.

        Returns:
            Optional[Tuple[str, RestaurantRecord]]: (matcher id, candidate), or None.
        """
        for matcher in self.registry.chain:
            candidate = self._scan(matcher, driving, candidates)
            if candidate is not None:
                return matcher.name, candidate
            logger.trace(f"'{driving.name}': no {matcher.name} match, falling through")
        return None
