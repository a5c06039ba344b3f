"""Tests for the Rwanda reference tables and their lookup helpers."""

import pytest

from src.reference.rwanda import (
    DISTRICT_TO_PROVINCE,
    RWANDA,
    RWANDA_DISTRICTS,
    RWANDA_SECTORS,
    districts_with_sectors,
    is_valid_sector_for_district,
    sectors_by_district,
    total_sector_count,
)


class TestReferenceTables:
    def test_thirty_districts(self):
        assert len(RWANDA_DISTRICTS) == 30

    def test_every_district_has_a_province(self):
        assert set(DISTRICT_TO_PROVINCE) == set(RWANDA_DISTRICTS)
        assert set(DISTRICT_TO_PROVINCE.values()) == {
            "Kigali City",
            "Eastern Province",
            "Northern Province",
            "Southern Province",
            "Western Province",
        }

    def test_every_district_has_sectors(self):
        assert set(RWANDA_SECTORS) == set(RWANDA_DISTRICTS)
        assert all(RWANDA_SECTORS[d] for d in RWANDA_DISTRICTS)

    def test_profile(self):
        assert RWANDA.code == "rw"
        assert RWANDA.name == "Rwanda"
        assert RWANDA.province_for("GASABO") == "Kigali City"
        assert RWANDA.province_for(None) is None


class TestSectorsByDistrict:
    def test_sorted_and_case_insensitive(self):
        sectors = sectors_by_district("GASABO ")
        assert sectors == sorted(sectors)
        assert "Kimihurura" in sectors
        assert len(sectors) == 15

    def test_unknown_district(self):
        assert sectors_by_district("Kampala") == []


class TestHelpers:
    def test_districts_with_sectors(self):
        districts = districts_with_sectors()
        assert len(districts) == 30
        assert "Gasabo" in districts
        assert "Rusizi" in districts

    @pytest.mark.parametrize(
        ("sector", "district", "expected"),
        [
            ("Kimihurura", "Gasabo", True),
            ("kimihurura ", "gasabo", True),
            ("Kicukiro", "Kicukiro", True),
            ("Kimihurura", "Kicukiro", False),
            ("Kimihurura", "Atlantis", False),
        ],
    )
    def test_is_valid_sector_for_district(self, sector, district, expected):
        assert is_valid_sector_for_district(sector, district) is expected

    def test_total_sector_count(self):
        assert total_sector_count() == 401
