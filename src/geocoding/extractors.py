"""
Per-response field extraction.

Each extractor looks at one Nominatim response and returns the best value
it can find for a single field. Nothing here compares responses; that is
the merger's job.
"""

import logging
from typing import Optional

from src.geocoding.normalize import clean, normalize_district, normalize_sector
from src.models.geocode import Confidence, FieldCandidate, RawProviderResponse
from src.reference.rwanda import RWANDA

logger = logging.getLogger(__name__)

# Most administrative attribute first. The first two are trusted as "high".
DISTRICT_ATTRIBUTES = ("county", "district", "city_district", "municipality", "city")
HIGH_CONFIDENCE_DISTRICT_ATTRIBUTES = ("county", "district")

SECTOR_ATTRIBUTES = ("suburb", "neighbourhood", "town", "locality")

ROAD_ATTRIBUTES = ("road", "pedestrian", "path", "footway", "residential")
CELL_ATTRIBUTES = ("quarter", "cell")
VILLAGE_ATTRIBUTES = ("village", "hamlet")

DISPLAY_NAME_SOURCE = "display_name"


def extract_district(response: RawProviderResponse, profile=RWANDA) -> FieldCandidate:
    for attribute in DISTRICT_ATTRIBUTES:
        value = response.get(attribute)
        if not value:
            continue

        cleaned = clean(value, profile.naming)
        if profile.is_district(cleaned):
            confidence = (
                Confidence.HIGH
                if attribute in HIGH_CONFIDENCE_DISTRICT_ATTRIBUTES
                else Confidence.MEDIUM
            )
            return FieldCandidate(
                value=normalize_district(cleaned, profile.naming),
                confidence=confidence,
                source=attribute,
            )

    return FieldCandidate(confidence=Confidence.LOW)


def _is_sector_like(raw, cleaned, profile):
    """A sector must not be a district, a province, the country or a street."""
    lower = cleaned.lower()
    if profile.is_district(lower):
        return False
    # "Northern Province" cleans to "Northern", so the raw text is checked too
    if "province" in raw.lower() or "province" in lower or lower == profile.name.lower():
        return False
    if any(keyword in lower for keyword in profile.road_keywords):
        return False
    return True


def extract_sector(
    response: RawProviderResponse,
    profile=RWANDA,
    district: Optional[str] = None,
) -> FieldCandidate:
    """
    Find the sector in a response.

    Structured attributes are tried first and yield "medium". Some responses
    carry the sector only inside display_name, so when the district is
    already known the comma-separated trail is scanned for a part that sits
    before the district entry. That fallback is fuzzy (it can pick up a
    landmark or a house number) and is always graded "low".
    """
    for attribute in SECTOR_ATTRIBUTES:
        value = response.get(attribute)
        cleaned = clean(value, profile.naming)
        if cleaned and _is_sector_like(value, cleaned, profile):
            return FieldCandidate(
                value=normalize_sector(cleaned, profile.naming),
                confidence=Confidence.MEDIUM,
                source=attribute,
            )

    if district and response.display_name:
        sector = _sector_from_display_name(response.display_name, profile)
        if sector:
            logger.debug(f"Sector '{sector}' taken from display name '{response.display_name}'")
            return FieldCandidate(
                value=normalize_sector(sector, profile.naming),
                confidence=Confidence.LOW,
                source=DISPLAY_NAME_SOURCE,
            )

    return FieldCandidate(confidence=Confidence.LOW)


def _sector_from_display_name(display_name, profile):
    raw_parts = display_name.split(",")
    parts = [clean(part, profile.naming) for part in raw_parts]

    district_index = next(
        (i for i, part in enumerate(parts) if part and profile.is_district(part)),
        -1,
    )
    end = max(district_index, 0)
    # The head of the trail is the house or road, never the sector
    for raw, part in zip(raw_parts[1:end], parts[1:end]):
        if part and _is_sector_like(raw, part, profile):
            return part
    return None


def _first_present(response, attributes):
    for attribute in attributes:
        value = response.get(attribute)
        if value and value.strip():
            return value.strip()
    return None


def extract_road(response: RawProviderResponse) -> Optional[str]:
    # Road names are returned as the provider spells them
    return _first_present(response, ROAD_ATTRIBUTES)


def extract_cell(response: RawProviderResponse) -> Optional[str]:
    return _first_present(response, CELL_ATTRIBUTES)


def extract_village(response: RawProviderResponse) -> Optional[str]:
    return _first_present(response, VILLAGE_ATTRIBUTES)
