"""
Merging of per-zoom extractions into one GeocodeResult.

Responses arrive highest precision first. District and sector each keep a
running best candidate, updated by `pick_candidate` over the ordered
lattice none < low < medium < high. The district keeps the first `high`
value it sees; the sector takes the latest value of at least `medium`.
"""

import logging
from typing import List, Optional

from src.geocoding.extractors import (
    extract_cell,
    extract_district,
    extract_road,
    extract_sector,
    extract_village,
)
from src.geocoding.normalize import clean
from src.models.geocode import (
    Confidence,
    FieldCandidate,
    GeocodeResult,
    GeocodeSources,
    RawProviderResponse,
)
from src.reference.rwanda import RWANDA

logger = logging.getLogger(__name__)

DERIVED_SOURCE = "derived"

_RANK = {
    None: 0,
    Confidence.LOW: 1,
    Confidence.MEDIUM: 2,
    Confidence.HIGH: 3,
}

# Minimum confidence a later candidate needs to replace an earlier pick
DISTRICT_REPLACE_THRESHOLD = Confidence.HIGH
SECTOR_REPLACE_THRESHOLD = Confidence.MEDIUM

EMPTY = FieldCandidate(confidence=Confidence.LOW)


def rank(candidate: Optional[FieldCandidate]) -> int:
    if candidate is None or candidate.value is None:
        return _RANK[None]
    return _RANK[candidate.confidence]


def pick_candidate(
    current: FieldCandidate,
    candidate: FieldCandidate,
    threshold: Confidence,
    keep_first: bool = True,
) -> FieldCandidate:
    """
    Return whichever of `current` and `candidate` should be the running best.

    A candidate without a value never wins. A candidate fills an empty slot
    unconditionally. Otherwise it must reach `threshold`. With `keep_first`
    it must also strictly beat the current pick, so the first of two equally
    confident values is kept; without it the later value wins.
    """
    if candidate.value is None:
        return current
    if current.value is None:
        return candidate
    if rank(candidate) < _RANK[threshold]:
        return current
    if keep_first and rank(candidate) <= rank(current):
        return current
    return candidate


def pick_district(current: FieldCandidate, candidate: FieldCandidate) -> FieldCandidate:
    return pick_candidate(current, candidate, DISTRICT_REPLACE_THRESHOLD, keep_first=True)


def pick_sector(current: FieldCandidate, candidate: FieldCandidate) -> FieldCandidate:
    return pick_candidate(current, candidate, SECTOR_REPLACE_THRESHOLD, keep_first=False)


def overall_confidence(district: FieldCandidate, sector: FieldCandidate) -> Confidence:
    district_confidence = district.confidence if district.value else Confidence.LOW
    sector_confidence = sector.confidence if sector.value else Confidence.LOW

    if district_confidence == Confidence.HIGH and sector_confidence != Confidence.LOW:
        return Confidence.HIGH
    if district_confidence != Confidence.LOW or sector_confidence != Confidence.LOW:
        return Confidence.MEDIUM
    return Confidence.LOW


def derive_province(district: Optional[str], profile=RWANDA) -> Optional[str]:
    # Never guess: a district missing from the table leaves the province empty
    cleaned = clean(district, profile.naming)
    province = profile.province_for(cleaned)
    if cleaned and province is None:
        logger.warning(f"No province mapping for district '{district}'")
    return province


def build_address_text(road, sector, district, province, country_name) -> str:
    parts = [road, sector, f"{district} District" if district else None, province, country_name]
    return ", ".join(part for part in parts if part)


def merge_results(responses: List[RawProviderResponse], profile=RWANDA) -> GeocodeResult:
    if not responses:
        raise ValueError("Cannot merge an empty list of provider responses")

    best_district = EMPTY
    best_sector = EMPTY
    road = cell = village = None

    for response in responses:
        best_district = pick_district(best_district, extract_district(response, profile))
        best_sector = pick_sector(
            best_sector, extract_sector(response, profile, district=best_district.value)
        )

        # First non-empty value wins for the unmerged fields
        road = road or extract_road(response)
        cell = cell or extract_cell(response)
        village = village or extract_village(response)

    province = derive_province(best_district.value, profile)

    return GeocodeResult(
        address_text=build_address_text(
            road, best_sector.value, best_district.value, province, profile.name
        ),
        province=province,
        district=best_district.value,
        sector=best_sector.value,
        cell=cell,
        village=village,
        road=road,
        confidence=overall_confidence(best_district, best_sector),
        sources=GeocodeSources(
            province=DERIVED_SOURCE if province else None,
            district=best_district.source,
            sector=best_sector.source,
        ),
    )
