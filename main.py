import os
import asyncio
import json
import sys
from loguru import logger

from restolink.models import LinkageResult
from restolink.snapshot_loader import SnapshotLoadError, load_snapshots
from restolink.matchers import build_default_registry, link_restaurants
from restolink.report import unmatched_frame
from restolink.config import (
    MAITRE_SNAPSHOT,
    MICHELIN_SNAPSHOT,
    MATCHES_OUTPUT,
    UNMATCHED_OUTPUT,
    MATCH_MODE,
    CLAIM_POLICY,
    LOG_LEVEL,
)


def write_matches(result: LinkageResult, output_path: str) -> None:
    """Write match pairs as an indented JSON array of {maitre, michelin, matcher} objects."""
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([pair.to_dict() for pair in result.pairs], f, indent=2, ensure_ascii=False)


def write_unmatched(result: LinkageResult, output_path: str) -> None:
    """Write driving records without a counterpart as CSV."""
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    unmatched_frame(result).to_csv(output_path, index=False)


async def main():
    """
    Run one linkage pass.

    - Loads the Maitres Restaurateurs (driving) and Michelin (candidate) snapshots.
    - Links every Maitre restaurant to at most one Michelin restaurant.
    - Writes the pairs as JSON and the unmatched restaurants as CSV.
    """
    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    # Both snapshots must load before any matching happens
    try:
        maitre_restaurants, michelin_restaurants = await load_snapshots(MAITRE_SNAPSHOT, MICHELIN_SNAPSHOT)
    except SnapshotLoadError as e:
        logger.error(f"Aborting linkage run, {e.source} snapshot unusable: {e}")
        raise

    registry = build_default_registry()
    result = link_restaurants(
        maitre_restaurants,
        michelin_restaurants,
        registry=registry,
        mode=MATCH_MODE,
        policy=CLAIM_POLICY,
    )

    write_matches(result, MATCHES_OUTPUT)
    write_unmatched(result, UNMATCHED_OUTPUT)
    logger.info(f"Wrote {len(result.pairs)} pairs to {MATCHES_OUTPUT}, {len(result.unmatched)} unmatched to {UNMATCHED_OUTPUT}")


if __name__ == "__main__":
    asyncio.run(main())
