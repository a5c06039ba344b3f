class GeocodingError(Exception):
    """Base exception for all geocoding errors."""


class OutOfBounds(GeocodingError):
    """Coordinates fall outside the configured country bounding box."""

    def __init__(self, latitude, longitude, country="Rwanda"):
        self.latitude = latitude
        self.longitude = longitude
        self.country = country
        super().__init__(f"Coordinates ({latitude}, {longitude}) are outside {country}")


class UpstreamUnavailable(GeocodingError):
    """The geocoding provider gave no usable data for the request."""

    def __init__(self, detail="No usable response from the geocoding provider"):
        self.detail = detail
        super().__init__(detail)


class InvalidQuery(GeocodingError):
    """A query parameter was missing or empty."""

    def __init__(self, query, message=None):
        self.query = query
        super().__init__(message or f"Invalid geocoding query: '{query}'")


class ResolutionCancelled(GeocodingError):
    """The caller cancelled the resolution before all provider calls finished."""
