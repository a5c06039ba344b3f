import requests
import time
import logging
import os
import concurrent.futures
from typing import Optional, List
from threading import Lock

from pydantic import ValidationError

from src.geocoding.errors import ResolutionCancelled, UpstreamUnavailable
from src.models.geocode import RawProviderResponse
from src.reference.rwanda import RWANDA

# Constants
NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org").rstrip("/")
NOMINATIM_REVERSE_URL = f"{NOMINATIM_URL}/reverse"
NOMINATIM_SEARCH_URL = f"{NOMINATIM_URL}/search"
USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "CIRA-Infrastructure-Reporting/1.0")
REQUEST_TIMEOUT = float(os.getenv("NOMINATIM_TIMEOUT", "10"))
RATE_LIMIT_DELAY = float(os.getenv("NOMINATIM_DELAY", "0.1"))

# zoom 18: building level, zoom 14: district level, zoom 10: province level
ZOOM_LEVELS = (18, 14, 10)

# How often a parallel fan-out checks its cancel event while calls are in flight
CANCEL_POLL_INTERVAL = 0.05

HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}

# Get logger
logger = logging.getLogger(__name__)


class RateLimiter:
    """Spaces out request starts against one host, shared across threads."""

    def __init__(self, min_interval):
        self.min_interval = min_interval
        self._lock = Lock()
        self._last_start = 0.0

    def wait(self, cancel_event=None):
        with self._lock:
            pause = self._last_start + self.min_interval - time.monotonic()
            if pause > 0:
                if cancel_event is not None:
                    cancel_event.wait(pause)
                else:
                    time.sleep(pause)
            self._last_start = time.monotonic()


# One limiter per process for the public Nominatim host
nominatim_limiter = RateLimiter(RATE_LIMIT_DELAY)


def _get_json(url, params, session=None, timeout=REQUEST_TIMEOUT):
    """GET a JSON document from Nominatim. Returns None on any HTTP or transport failure."""
    http = session or requests
    try:
        response = http.get(url, params=params, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        logger.warning(f"Nominatim request failed ({url}, {params}): {e}")
        return None

    if response.status_code != 200:
        logger.warning(f"Nominatim HTTP error ({response.status_code}) for {url} {params}")
        return None

    try:
        return response.json()
    except ValueError as e:
        logger.warning(f"Malformed JSON from Nominatim for {url} {params}: {e}")
        return None


def query_nominatim(latitude, longitude, zoom, session=None, timeout=REQUEST_TIMEOUT) -> Optional[RawProviderResponse]:
    params = {
        "lat": latitude,
        "lon": longitude,
        "format": "json",
        "zoom": zoom,
        "addressdetails": 1,
    }

    data = _get_json(NOMINATIM_REVERSE_URL, params, session=session, timeout=timeout)
    if not isinstance(data, dict):
        return None

    try:
        return RawProviderResponse.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Unexpected Nominatim payload at zoom {zoom}: {e.error_count()} validation errors")
        return None


def _belongs_to(response, profile):
    code = response.country_code
    return code is not None and code.lower() == profile.code.lower()


def _check_cancelled(cancel_event):
    if cancel_event is not None and cancel_event.is_set():
        raise ResolutionCancelled("Reverse geocoding cancelled by caller")


def fetch_reverse_responses(
    latitude,
    longitude,
    profile=RWANDA,
    session=None,
    zoom_levels=ZOOM_LEVELS,
    delay=None,
    parallel=False,
    cancel_event=None,
    timeout=REQUEST_TIMEOUT,
) -> List[RawProviderResponse]:
    """
    Reverse geocode one coordinate at each zoom level, most detailed first.

    Args:
        latitude, longitude: Coordinate already checked to lie inside the country
        profile: Country whose code every kept response must carry
        session: Optional requests.Session (or compatible) used for the calls
        zoom_levels: Zoom levels to query, in the order results are returned
        delay: Minimum spacing between call starts. Sequential mode sleeps this
            long between calls. Parallel mode spaces its calls with a private
            RateLimiter(delay). None means RATE_LIMIT_DELAY, and in parallel mode
            the process-wide nominatim_limiter
        parallel: If True, issue the calls from a thread pool
        cancel_event: threading.Event; once set, remaining and in-flight calls are abandoned
        timeout: Per-call HTTP timeout in seconds

    Returns:
        Responses that were fetched and belong to the country, in zoom order.
        A failed zoom level is skipped, never retried.

    Raises:
        ResolutionCancelled if cancel_event is set before the calls complete
    """
    if parallel:
        limiter = nominatim_limiter if delay is None else RateLimiter(delay)
        fetched = _fetch_parallel(latitude, longitude, zoom_levels, session, limiter, cancel_event, timeout)
    else:
        if delay is None:
            delay = RATE_LIMIT_DELAY
        fetched = _fetch_sequential(latitude, longitude, zoom_levels, session, delay, cancel_event, timeout)

    results = []
    for zoom, response in zip(zoom_levels, fetched):
        if response is None:
            continue
        if not _belongs_to(response, profile):
            logger.debug(f"Dropping zoom {zoom} response outside {profile.name} (country_code={response.country_code})")
            continue
        logger.debug(f"Nominatim zoom {zoom}: {response.display_name}")
        results.append(response)

    logger.info(f"Reverse geocoding ({latitude}, {longitude}): {len(results)}/{len(zoom_levels)} usable responses")
    return results


def _fetch_sequential(latitude, longitude, zoom_levels, session, delay, cancel_event, timeout):
    fetched = []
    for i, zoom in enumerate(zoom_levels):
        _check_cancelled(cancel_event)
        fetched.append(query_nominatim(latitude, longitude, zoom, session=session, timeout=timeout))

        # Small delay to respect rate limits, not after the final call
        if delay > 0 and i < len(zoom_levels) - 1:
            if cancel_event is not None:
                cancel_event.wait(delay)
            else:
                time.sleep(delay)

    _check_cancelled(cancel_event)
    return fetched


def _fetch_parallel(latitude, longitude, zoom_levels, session, limiter, cancel_event, timeout):
    def fetch(zoom):
        limiter.wait(cancel_event)
        if cancel_event is not None and cancel_event.is_set():
            return None
        return query_nominatim(latitude, longitude, zoom, session=session, timeout=timeout)

    _check_cancelled(cancel_event)
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=len(zoom_levels))
    try:
        futures = [executor.submit(fetch, zoom) for zoom in zoom_levels]
        pending = set(futures)
        while pending and not (cancel_event is not None and cancel_event.is_set()):
            _, pending = concurrent.futures.wait(
                pending, timeout=CANCEL_POLL_INTERVAL, return_when=concurrent.futures.FIRST_COMPLETED
            )
        _check_cancelled(cancel_event)
        # Futures are read in submission order, i.e. zoom order
        return [future.result() for future in futures]
    finally:
        # Calls still in flight after a cancel are left to finish on their own
        executor.shutdown(wait=False, cancel_futures=True)


def search_nominatim(query, profile=RWANDA, session=None, limit=5, timeout=REQUEST_TIMEOUT) -> List[RawProviderResponse]:
    """
    Forward geocode free text, restricted to the profile's country.

    Raises UpstreamUnavailable if the single search call fails.
    """
    params = {
        "q": f"{query}, {profile.name}",
        "format": "json",
        "limit": limit,
        "addressdetails": 1,
        "countrycodes": profile.code,
    }

    data = _get_json(NOMINATIM_SEARCH_URL, params, session=session, timeout=timeout)
    if data is None:
        raise UpstreamUnavailable("Failed to geocode address")
    if not isinstance(data, list):
        logger.warning(f"Unexpected Nominatim search payload type: {type(data).__name__}")
        raise UpstreamUnavailable("Failed to geocode address")

    results = []
    for item in data:
        try:
            results.append(RawProviderResponse.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping malformed search result: {e.error_count()} validation errors")
    return results
