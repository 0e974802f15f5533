"""
Typed data models for the restaurant linkage pipeline.
All data structures shared between loading, matching and reporting live here.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Address:
    """Structured postal address. Any part may be missing."""
    street: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "street": self.street,
            "city": self.city,
            "zip": self.zip,
            "country": self.country,
        }


@dataclass(frozen=True)
class RestaurantRecord:
    """Normalized restaurant listing loaded from one directory snapshot."""
    name: str
    phone: Optional[str] = None  # One or more numbers joined by PHONE_DELIMITER
    website: Optional[str] = None
    reference: Optional[str] = None  # Hyphen-joined slug derived from the name
    address: Optional[Address] = None
    # Services, specialities, rating, price... never used for matching
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the snapshot shape, extra fields included."""
        data: Dict[str, Any] = {
            "name": self.name,
            "phone": self.phone,
            "website": self.website,
            "reference": self.reference,
            "address": self.address.to_dict() if self.address else None,
        }
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class MatchPair:
    """Hypothesized identity between a driving record and a candidate record."""
    driving: RestaurantRecord
    candidate: RestaurantRecord
    matcher: str  # Id of the matcher that linked the two records

    def to_dict(self, driving_key: str = "maitre", candidate_key: str = "michelin") -> Dict[str, Any]:
        return {
            driving_key: self.driving.to_dict(),
            candidate_key: self.candidate.to_dict(),
            "matcher": self.matcher,
        }


@dataclass
class LinkageResult:
    """Outcome of a linkage run over a whole driving collection."""
    pairs: List[MatchPair] = field(default_factory=list)
    unmatched: List[RestaurantRecord] = field(default_factory=list)
