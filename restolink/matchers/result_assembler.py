# restolink/matchers/result_assembler.py

from collections import Counter
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union
from loguru import logger

from restolink.matchers.linkage_engine import LinkageEngine
from restolink.matchers.registry import MatcherRegistry, build_default_registry
from restolink.models import LinkageResult, MatchPair, RestaurantRecord

CHAIN_MODE = "chain"


class ClaimPolicy(str, Enum):
    """What happens to a candidate once a driving record has been linked to it."""
    EXCLUSIVE = "exclusive"  # First claim wins, candidate leaves the pool
    REUSE = "reuse"  # Candidate stays available to later driving records


def link_restaurants(
    driving: Sequence[RestaurantRecord],
    candidates: Sequence[RestaurantRecord],
    registry: Optional[MatcherRegistry] = None,
    mode: str = CHAIN_MODE,
    policy: Union[ClaimPolicy, str] = ClaimPolicy.EXCLUSIVE,
) -> LinkageResult:
    """
    Link every driving record to at most one candidate record.

    Args:
        driving (Sequence[RestaurantRecord]): Collection iterated in order.
        candidates (Sequence[RestaurantRecord]): Collection searched for counterparts.
        registry (MatcherRegistry): Matchers to use (default registry if None).
        mode (str): "chain" for the prioritized matcher chain, or a single matcher id.
        policy (ClaimPolicy | str): Whether a candidate can be linked more than once.

    Returns:
        LinkageResult: Pairs in driving order, plus the driving records left unmatched.
    """
    registry = registry or build_default_registry()
    policy = ClaimPolicy(policy)
    if mode != CHAIN_MODE and mode not in registry:
        raise ValueError(f"Unknown match mode '{mode}'. Use '{CHAIN_MODE}' or one of {list(registry.ids)}")

    engine = LinkageEngine(registry)
    pool: List[RestaurantRecord] = list(candidates)
    result = LinkageResult()

    for record in driving:
        resolution: Optional[Tuple[str, RestaurantRecord]]
        if mode == CHAIN_MODE:
            resolution = engine.resolve_chain(record, pool)
        else:
            found = engine.resolve(record, pool, mode)
            resolution = (mode, found) if found is not None else None

        if resolution is None:
            result.unmatched.append(record)
            continue

        matcher_id, candidate = resolution
        logger.debug(f"🔗 '{record.name}' ↔ '{candidate.name}' via {matcher_id}")
        result.pairs.append(MatchPair(driving=record, candidate=candidate, matcher=matcher_id))

        if policy is ClaimPolicy.EXCLUSIVE:
            pool = [c for c in pool if c is not candidate]

    logger.info(
        f"Linked {len(result.pairs)}/{len(driving)} driving records against "
        f"{len(candidates)} candidates (mode={mode}, policy={policy.value}); "
        f"{len(result.unmatched)} unmatched; by matcher: {count_by_matcher(result.pairs)}"
    )
    return result


def count_by_matcher(pairs: Sequence[MatchPair]) -> Dict[str, int]:
    return dict(Counter(pair.matcher for pair in pairs))
