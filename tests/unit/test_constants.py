"""
Tests for resume_intel.utils.constants — vocabularies and gazetteers.
"""

import pytest

from resume_intel.utils.constants import (
    COUNTRY_NAMES,
    EDUCATION_TERMS,
    MAJOR_CITIES,
    MONTH_NUMBERS,
    PRESENT_TOKENS,
    ROLE_KEYWORDS,
    SECTION_HEADINGS,
    TECH_TERMS,
    US_STATE_CODES,
)


# ── Geography ────────────────────────────────────────────────────────────────


class TestMajorCities:
    def test_count(self):
        assert len(MAJOR_CITIES) == 47

    def test_no_duplicates(self):
        assert len(set(MAJOR_CITIES)) == len(MAJOR_CITIES)

    @pytest.mark.parametrize("city", MAJOR_CITIES)
    def test_city_state_form(self, city):
        name, state = city.rsplit(", ", 1)
        assert name
        assert state in US_STATE_CODES


class TestRegions:
    def test_state_codes_include_dc(self):
        assert len(US_STATE_CODES) == 51
        assert "DC" in US_STATE_CODES

    def test_country_names_upper_cased(self):
        assert all(name == name.upper() for name in COUNTRY_NAMES)


# ── Dates ────────────────────────────────────────────────────────────────────


class TestMonthNumbers:
    def test_zero_based(self):
        assert MONTH_NUMBERS["jan"] == 0
        assert MONTH_NUMBERS["december"] == 11

    def test_abbreviation_matches_full_name(self):
        for name, number in MONTH_NUMBERS.items():
            assert MONTH_NUMBERS[name[:3]] == number

    def test_every_month_present(self):
        assert set(MONTH_NUMBERS.values()) == set(range(12))

    def test_present_tokens_lowercase(self):
        assert PRESENT_TOKENS == ("present", "current", "now")


# ── Vocabularies ─────────────────────────────────────────────────────────────


class TestVocabularies:
    def test_role_keywords_capitalised(self):
        assert len(ROLE_KEYWORDS) == 21
        assert all(keyword[0].isupper() for keyword in ROLE_KEYWORDS)

    def test_lowercase_vocabularies(self):
        for vocabulary in (EDUCATION_TERMS, TECH_TERMS, SECTION_HEADINGS):
            assert all(term == term.lower() for term in vocabulary)
