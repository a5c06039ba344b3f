import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Optional, Tuple


@dataclass(frozen=True)
class NamingRules:
    """
    Locale-specific patterns stripped from administrative place names.

    Prefix patterns are applied in order (one pass per language), then the
    suffix pattern. Each prefix must be followed by whitespace and the suffix
    must be preceded by whitespace, so a bare "District" is left alone.
    """

    locale: str
    prefixes: Tuple[str, ...]
    suffixes: Tuple[str, ...]
    _prefix_res: Tuple[re.Pattern, ...] = field(init=False, repr=False, compare=False)
    _suffix_re: Optional[re.Pattern] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        prefix_res = tuple(re.compile(rf"^(?:{p})\s+", re.IGNORECASE) for p in self.prefixes)
        suffix_re = None
        if self.suffixes:
            suffix_re = re.compile(rf"\s+(?:{'|'.join(self.suffixes)})$", re.IGNORECASE)
        object.__setattr__(self, "_prefix_res", prefix_res)
        object.__setattr__(self, "_suffix_re", suffix_re)

    def strip_once(self, name: str) -> str:
        for pattern in self._prefix_res:
            name = pattern.sub("", name)
        if self._suffix_re is not None:
            name = self._suffix_re.sub("", name)
        return name.strip()


@dataclass(frozen=True)
class CountryProfile:
    """Static reference data for one target country, injected into every operation."""

    code: str                                   # ISO 3166-1 alpha-2, lower case
    name: str                                   # appended to every display address
    bbox: str                                   # "min_lon, min_lat, max_lon, max_lat"
    districts: FrozenSet[str]                   # lower-cased district names
    district_to_province: Mapping[str, str]
    sectors_by_district: Mapping[str, Tuple[str, ...]]
    naming: NamingRules
    road_keywords: Tuple[str, ...] = ("road", "street", "avenue", "boulevard", "highway", "route")

    def is_district(self, name: Optional[str]) -> bool:
        return bool(name) and name.lower() in self.districts

    def province_for(self, district: Optional[str]) -> Optional[str]:
        if not district:
            return None
        return self.district_to_province.get(district.lower())

    def sectors_for(self, district: str) -> Tuple[str, ...]:
        return self.sectors_by_district.get(district.strip().lower(), ())


def build_sector_index(raw: Dict[str, list]) -> Dict[str, Tuple[str, ...]]:
    return {district.lower(): tuple(sectors) for district, sectors in raw.items()}
