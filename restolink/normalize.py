"""
Text cleanup helpers used while turning raw snapshot entries into records.
These run on the extraction side; the matchers never call them.
"""
import re
import unicodedata
from typing import Any, Dict, Iterable, Optional, Union

from restolink.config import PHONE_DELIMITER

_WHITESPACE_RUN = re.compile(r"\s{2,}")
_LINE_BREAKS = re.compile(r"[\r\n]+")
_NON_SLUG_CHARS = re.compile(r"[^-\w]")


def clean_text(text: Optional[str]) -> Optional[str]:
    """Trim, drop line breaks and collapse whitespace runs. Empty text becomes None."""
    if text is None:
        return None
    cleaned = _LINE_BREAKS.sub(" ", str(text))
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned).strip()
    return cleaned or None


def clean_fields(entry: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Optional[str]]:
    """Apply clean_text to the given keys of a dict, missing keys map to None."""
    return {name: clean_text(entry.get(name)) for name in fields}


def create_reference(name: str) -> str:
    """
    Build a hyphen-joined identity slug from a restaurant name.

    Example: "Le Petit Bistrô" -> "le-petit-bistro"
    """
    decomposed = unicodedata.normalize("NFD", name.strip().lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    slug = re.sub(r"\s+", "-", stripped)
    return _NON_SLUG_CHARS.sub("", slug)


def join_phones(phone: Union[str, Iterable[str], None]) -> Optional[str]:
    """
    Collapse a phone list into one delimiter-separated string. Nothing usable -> None.

    Raises:
        ValueError: If phone is neither a string nor a list.
    """
    if phone is None:
        return None
    if isinstance(phone, str):
        return clean_text(phone)
    if not isinstance(phone, (list, tuple)):
        raise ValueError(f"phone must be a string or a list of strings, got {type(phone).__name__}")
    numbers = [clean_text(p) for p in phone if p is not None]
    numbers = [n for n in numbers if n]
    return PHONE_DELIMITER.join(numbers) if numbers else None
