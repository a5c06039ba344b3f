from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RawProviderResponse(BaseModel):
    """One Nominatim reverse or search hit, kept only for a single resolution."""

    model_config = ConfigDict(extra="ignore")

    display_name: Optional[str] = None
    address: Dict[str, str] = Field(default_factory=dict)
    boundingbox: Optional[List[str]] = None
    # Only present on forward search hits
    lat: Optional[float] = None
    lon: Optional[float] = None

    @property
    def country_code(self) -> Optional[str]:
        return self.address.get("country_code")

    def get(self, attribute: str) -> Optional[str]:
        return self.address.get(attribute)


class FieldCandidate(BaseModel):
    """Best value one extractor found for one field of one response."""

    model_config = ConfigDict(frozen=True)

    value: Optional[str] = None
    confidence: Confidence = Confidence.LOW
    source: Optional[str] = None  # raw attribute that produced the value


class GeocodeSources(BaseModel):
    province: Optional[str] = None
    district: Optional[str] = None
    sector: Optional[str] = None


class GeocodeResult(BaseModel):
    """Final caller-facing record for a reverse geocoding request."""

    model_config = ConfigDict(populate_by_name=True)

    address_text: str = Field(min_length=1, serialization_alias="addressText")
    province: Optional[str] = None
    district: Optional[str] = None
    sector: Optional[str] = None
    cell: Optional[str] = None
    village: Optional[str] = None
    road: Optional[str] = None
    confidence: Confidence = Confidence.LOW
    sources: GeocodeSources = Field(default_factory=GeocodeSources)

    @property
    def is_partial(self) -> bool:
        """Low-confidence results should be flagged to end users, not trusted."""
        return self.confidence == Confidence.LOW

    def to_dict(self) -> dict:
        """Convert to the JSON shape served by the HTTP API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ForwardGeocodeCandidate(BaseModel):
    """One location returned by a forward (text to coordinates) search."""

    latitude: float
    longitude: float
    display_name: str = Field(serialization_alias="displayName")
    road: Optional[str] = None
    sector: Optional[str] = None
    district: Optional[str] = None
    province: Optional[str] = None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
