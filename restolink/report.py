"""Tabular views of a linkage run, for CSV export and quick inspection."""
import pandas as pd

from restolink.models import LinkageResult

PAIR_COLUMNS = [
    "matcher",
    "driving_name",
    "candidate_name",
    "driving_phone",
    "candidate_phone",
    "driving_website",
    "candidate_website",
    "driving_city",
    "candidate_city",
]
UNMATCHED_COLUMNS = ["name", "phone", "website", "reference", "street", "city", "zip", "country"]


def pairs_frame(result: LinkageResult) -> pd.DataFrame:
    """One row per match pair, driving and candidate fields side by side."""
    rows = []
    for pair in result.pairs:
        rows.append({
            "matcher": pair.matcher,
            "driving_name": pair.driving.name,
            "candidate_name": pair.candidate.name,
            "driving_phone": pair.driving.phone,
            "candidate_phone": pair.candidate.phone,
            "driving_website": pair.driving.website,
            "candidate_website": pair.candidate.website,
            "driving_city": pair.driving.address.city if pair.driving.address else None,
            "candidate_city": pair.candidate.address.city if pair.candidate.address else None,
        })
    return pd.DataFrame(rows, columns=PAIR_COLUMNS)


def unmatched_frame(result: LinkageResult) -> pd.DataFrame:
    """One row per driving record that found no counterpart."""
    rows = []
    for record in result.unmatched:
        address = record.address.to_dict() if record.address else {}
        rows.append({
            "name": record.name,
            "phone": record.phone,
            "website": record.website,
            "reference": record.reference,
            "street": address.get("street"),
            "city": address.get("city"),
            "zip": address.get("zip"),
            "country": address.get("country"),
        })
    return pd.DataFrame(rows, columns=UNMATCHED_COLUMNS)


def matcher_counts(result: LinkageResult) -> pd.Series:
    """Number of pairs produced by each matcher."""
    return pairs_frame(result)["matcher"].value_counts()
