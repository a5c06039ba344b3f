import logging
from typing import List

from src.geocoding.bounds import is_in_country
from src.geocoding.errors import InvalidQuery, OutOfBounds, UpstreamUnavailable
from src.geocoding.extractors import extract_district, extract_road, extract_sector
from src.geocoding.merge import derive_province, merge_results
from src.geocoding.nominatim import fetch_reverse_responses, search_nominatim
from src.models.geocode import ForwardGeocodeCandidate, GeocodeResult
from src.reference.rwanda import RWANDA

# Get logger
logger = logging.getLogger(__name__)


def resolve(latitude, longitude, profile=RWANDA, **fetch_options) -> GeocodeResult:
    """
    Resolve a coordinate to a structured administrative address.

    Latitude/longitude must already be range-checked by the caller.
    Extra keyword arguments (session, delay, parallel, cancel_event, ...)
    are passed to fetch_reverse_responses.

    Raises OutOfBounds before any network call if the point is outside the
    country, and UpstreamUnavailable if no zoom level gave a usable response.
    A low-confidence result is returned, not raised.
    """
    if not is_in_country(latitude, longitude, profile.bbox):
        logger.warning(f"Coordinates ({latitude}, {longitude}) outside {profile.name} bounds")
        raise OutOfBounds(latitude, longitude, profile.name)

    responses = fetch_reverse_responses(latitude, longitude, profile=profile, **fetch_options)
    if not responses:
        logger.warning(f"No valid Nominatim results for ({latitude}, {longitude})")
        raise UpstreamUnavailable("Failed to reverse geocode coordinates")

    result = merge_results(responses, profile)

    if result.is_partial:
        logger.warning(f"Low-confidence geocoding for ({latitude}, {longitude}): {result.address_text}")
    else:
        logger.info(f"Successfully geocoded ({latitude}, {longitude}) -> {result.address_text} [{result.confidence.value}]")
    return result


def resolve_address(query, profile=RWANDA, session=None, limit=5) -> List[ForwardGeocodeCandidate]:
    """Forward geocode free text to candidate locations inside the country. No merging."""
    if query is None or not query.strip():
        raise InvalidQuery(query, 'Query parameter "q" is required')
    query = query.strip()

    candidates = []
    for hit in search_nominatim(query, profile=profile, session=session, limit=limit):
        if hit.lat is None or hit.lon is None:
            continue
        if not is_in_country(hit.lat, hit.lon, profile.bbox):
            logger.debug(f"Dropping search hit outside {profile.name}: {hit.display_name}")
            continue

        district = extract_district(hit, profile)
        sector = extract_sector(hit, profile, district=district.value)
        candidates.append(ForwardGeocodeCandidate(
            latitude=hit.lat,
            longitude=hit.lon,
            display_name=hit.display_name or query,
            road=extract_road(hit),
            sector=sector.value,
            district=district.value,
            province=derive_province(district.value, profile),
        ))

    logger.info(f"Forward geocoding '{query}': {len(candidates)} candidates in {profile.name}")
    return candidates
