from typing import Dict, Iterable, Sequence, Tuple
from loguru import logger

from restolink.config import ADDRESS_THRESHOLD, MATCHER_CHAIN, REFERENCE_THRESHOLD
from restolink.matchers.field_matchers import (
    AddressMatcher,
    FieldMatcher,
    PhoneMatcher,
    ReferenceMatcher,
    WebsiteMatcher,
)


class MatcherRegistry:
    """
    Fixed set of field matchers keyed by id, plus the priority order used
    when matchers are chained.
    """

    def __init__(self, matchers: Iterable[FieldMatcher], chain: Sequence[str] = MATCHER_CHAIN):
        self._matchers: Dict[str, FieldMatcher] = {}
        for matcher in matchers:
            if matcher.name in self._matchers:
                raise ValueError(f"Duplicate matcher id '{matcher.name}'")
            self._matchers[matcher.name] = matcher

        for matcher_id in chain:
            if matcher_id not in self._matchers:
                raise ValueError(f"Matcher chain references unknown matcher '{matcher_id}'")
        self._chain: Tuple[str, ...] = tuple(chain)

    def get(self, matcher_id: str) -> FieldMatcher:
        try:
            return self._matchers[matcher_id]
        except KeyError:
            raise ValueError(
                f"Unknown matcher '{matcher_id}'. Known matchers: {sorted(self._matchers)}"
            ) from None

    def __contains__(self, matcher_id: str) -> bool:
        return matcher_id in self._matchers

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(self._matchers)

    @property
    def chain(self) -> Tuple[FieldMatcher, ...]:
        """Matchers in priority order."""
        return tuple(self._matchers[matcher_id] for matcher_id in self._chain)


def build_default_registry(
    reference_threshold: float = REFERENCE_THRESHOLD,
    address_threshold: float = ADDRESS_THRESHOLD,
) -> MatcherRegistry:
    """Registry with the phone, website, reference and address matchers in priority order."""
    registry = MatcherRegistry(
        [
            PhoneMatcher(),
            WebsiteMatcher(),
            ReferenceMatcher(threshold=reference_threshold),
            AddressMatcher(threshold=address_threshold),
        ]
    )
    logger.debug(
        f"Matcher registry built: chain={[m.name for m in registry.chain]}, "
        f"reference>{reference_threshold}, address>{address_threshold}"
    )
    return registry
