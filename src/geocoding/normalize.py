"""Normalisation of Rwandan administrative place names."""

from typing import Optional

from src.reference.naming import NAMING_RULES

DEFAULT_RULES = NAMING_RULES["rw"]


def clean(raw: Optional[str], rules=DEFAULT_RULES) -> Optional[str]:
    """
    Strip bilingual administrative prefixes and suffixes from a place name.

    "Akarere ka Gasabo" -> "Gasabo", "District of Huye" -> "Huye",
    "Kicukiro District" -> "Kicukiro". Prefixes go before suffixes, and the
    rules repeat until nothing changes so the result is a fixed point
    ("Kigali City District" -> "Kigali"). Returns None for None or blank input.
    """
    if raw is None:
        return None
    cleaned = raw.strip()
    while cleaned:
        stripped = rules.strip_once(cleaned)
        if stripped == cleaned:
            break
        cleaned = stripped
    return cleaned or None


def normalize_district(raw: str, rules=DEFAULT_RULES) -> str:
    """
    Clean and capitalise a district name as a single unit.

    Only the first character is upper-cased ("lower kigali" -> "Lower kigali"),
    unlike normalize_sector. Input that cleans to nothing is returned as-is.
    """
    cleaned = clean(raw, rules)
    if not cleaned:
        return raw
    return cleaned.capitalize()


def normalize_sector(raw: str, rules=DEFAULT_RULES) -> str:
    """Clean a sector name and capitalise every word ("lower kigali" -> "Lower Kigali")."""
    cleaned = clean(raw, rules)
    if not cleaned:
        return raw
    return " ".join(word.capitalize() for word in cleaned.split(" "))
