"""
Read the JSON snapshots written by the directory scrapers and turn each entry
into a RestaurantRecord. A snapshot that cannot be read aborts the run.
"""
import asyncio
import json
from typing import Any, Dict, List, Optional, Tuple
from loguru import logger

from restolink.config import DERIVE_REFERENCE
from restolink.models import Address, RestaurantRecord
from restolink.normalize import clean_fields, clean_text, create_reference, join_phones

MATCHED_FIELDS = ("name", "phone", "website", "reference", "address")
ADDRESS_FIELDS = ("street", "city", "zip", "country")


class SnapshotLoadError(RuntimeError):
    """Raised when a source snapshot is missing, unreadable or malformed."""

    def __init__(self, source: str, path: str, reason: str):
        self.source = source
        self.path = path
        super().__init__(f"Failed to load '{source}' snapshot from {path}: {reason}")


def _parse_address(value: Any) -> Optional[Address]:
    if not isinstance(value, dict):
        return None
    parts = clean_fields(value, ADDRESS_FIELDS)
    if not any(parts.values()):
        return None
    return Address(**parts)


def record_from_entry(entry: Dict[str, Any], derive_reference: bool = DERIVE_REFERENCE) -> RestaurantRecord:
    """
    Convert one snapshot entry into a RestaurantRecord.

    Args:
        entry (Dict[str, Any]): Raw entry as written by a scraper.
        derive_reference (bool): Build the reference slug from the name when absent.

    Returns:
        RestaurantRecord: Cleaned record; unknown keys are kept in `extra`.

    Raises:
        ValueError: If the entry has no usable name.
    """
    name = clean_text(entry.get("name"))
    if not name:
        raise ValueError("entry has no name")

    reference = clean_text(entry.get("reference"))
    if reference is None and derive_reference:
        reference = create_reference(name) or None

    website = entry.get("website")
    return RestaurantRecord(
        name=name,
        phone=join_phones(entry.get("phone")),
        website=clean_text(website) if isinstance(website, str) else None,
        reference=reference,
        address=_parse_address(entry.get("address")),
        extra={k: v for k, v in entry.items() if k not in MATCHED_FIELDS},
    )


def load_restaurants_from_json(
    file_path: str,
    source: str,
    derive_reference: bool = DERIVE_REFERENCE,
) -> List[RestaurantRecord]:
    """Load a snapshot (a JSON array of restaurant objects) into RestaurantRecord objects."""
    try:
        with open(file_path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:  # ValueError covers bad JSON and bad UTF-8
        raise SnapshotLoadError(source, file_path, str(e)) from e

    if not isinstance(raw, list):
        raise SnapshotLoadError(source, file_path, f"expected a JSON array, got {type(raw).__name__}")

    records = []
    for index, entry in enumerate(raw):
        # The scrapers write null for pages that failed to download
        if entry is None:
            logger.warning(f"⚠️ {source}: skipping null entry #{index} in {file_path}")
            continue
        if not isinstance(entry, dict):
            raise SnapshotLoadError(
                source, file_path, f"entry #{index} is a {type(entry).__name__}, expected an object"
            )
        try:
            records.append(record_from_entry(entry, derive_reference=derive_reference))
        except ValueError as e:
            raise SnapshotLoadError(source, file_path, f"entry #{index}: {e}") from e

    logger.info(f"Loaded {len(records)} {source} restaurants from {file_path}")
    return records


async def load_snapshots(
    driving_path: str,
    candidate_path: str,
    driving_source: str = "maitre",
    candidate_source: str = "michelin",
    derive_reference: bool = DERIVE_REFERENCE,
) -> Tuple[List[RestaurantRecord], List[RestaurantRecord]]:
    """
    Load both snapshots concurrently. Matching only starts once both are
    fully materialized; the first SnapshotLoadError propagates to the caller.

    Returns:
        Tuple[List[RestaurantRecord], List[RestaurantRecord]]: (driving, candidates)
    """
    driving, candidates = await asyncio.gather(
        asyncio.to_thread(load_restaurants_from_json, driving_path, driving_source, derive_reference),
        asyncio.to_thread(load_restaurants_from_json, candidate_path, candidate_source, derive_reference),
    )
    return driving, candidates
