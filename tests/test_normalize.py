"""Tests for src.geocoding.normalize."""

import pytest

from src.geocoding.normalize import clean, normalize_district, normalize_sector
from src.models.country import NamingRules


class TestClean:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_input_returns_none(self, raw):
        assert clean(raw) is None

    def test_trims_whitespace(self):
        assert clean("  Gasabo  ") == "Gasabo"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Akarere ka Gasabo", "Gasabo"),
            ("akarere ka Huye", "Huye"),
            ("Umurenge wa Kimihurura", "Kimihurura"),
            ("Umurenge w' Remera", "Remera"),
            ("Intara ya Amajyepfo", "Amajyepfo"),
            ("District of Musanze", "Musanze"),
            ("SECTOR OF Kacyiru", "Kacyiru"),
            ("Province of Iburasirazuba", "Iburasirazuba"),
        ],
    )
    def test_strips_prefixes(self, raw, expected):
        assert clean(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Kicukiro District", "Kicukiro"),
            ("Remera Sector", "Remera"),
            ("Northern Province", "Northern"),
            ("Kigali City", "Kigali"),
            ("Huye district", "Huye"),
        ],
    )
    def test_strips_suffixes(self, raw, expected):
        assert clean(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["Gasabo", "District", "Districtville", "Cityscape Road", "Sectoral Hub", "Kimihurura"],
    )
    def test_leaves_other_names_alone(self, raw):
        assert clean(raw) == raw

    def test_prefix_and_suffix_together(self):
        assert clean("Akarere ka Gasabo District") == "Gasabo"

    @pytest.mark.parametrize(
        "raw",
        [
            "Akarere ka Gasabo",
            "Kigali City District",
            "District of Huye Sector",
            "  Umurenge wa Remera  ",
            "Kimihurura",
        ],
    )
    def test_idempotent(self, raw):
        once = clean(raw)
        assert clean(once) == once

    def test_stacked_suffixes_reach_fixed_point(self):
        assert clean("Kigali City District") == "Kigali"

    def test_custom_locale_rules(self):
        rules = NamingRules(locale="en", prefixes=(r"County of",), suffixes=("County",))
        assert clean("County of Kent", rules) == "Kent"
        assert clean("Kent County", rules) == "Kent"
        assert clean("Akarere ka Gasabo", rules) == "Akarere ka Gasabo"


class TestNormalizeDistrict:
    def test_upper_case_input(self):
        assert normalize_district("NYARUGENGE") == "Nyarugenge"

    def test_cleans_before_casing(self):
        assert normalize_district("Akarere ka GASABO") == "Gasabo"

    def test_multi_word_is_one_unit(self):
        # Only the first letter of the whole name is upper-cased
        assert normalize_district("lower kigali") == "Lower kigali"

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_unusable_input_returned_unchanged(self, raw):
        assert normalize_district(raw) == raw


class TestNormalizeSector:
    def test_upper_case_input(self):
        assert normalize_sector("KIMIHURURA") == "Kimihurura"

    def test_each_word_capitalised(self):
        assert normalize_sector("lower kigali") == "Lower Kigali"

    def test_differs_from_district_form(self):
        assert normalize_sector("lower kigali") != normalize_district("lower kigali")

    def test_cleans_before_casing(self):
        assert normalize_sector("Umurenge wa nyamirambo") == "Nyamirambo"

    def test_unusable_input_returned_unchanged(self):
        assert normalize_sector("  ") == "  "
