from __future__ import annotations

import pytest

from modules.orders import directory

pytestmark = pytest.mark.unit


class TestServiceArea:
    @pytest.mark.parametrize("zip_code", ["57072", "57080", "35683", "57610", " 57223 "])
    def test_known_zip_is_serviceable(self, zip_code):
        assert directory.is_serviceable(zip_code) is True

    @pytest.mark.parametrize("zip_code", ["99999", "10115", "", "5707"])
    def test_unknown_zip_is_not_serviceable(self, zip_code):
        assert directory.is_serviceable(zip_code) is False

    def test_several_zips_share_one_city(self):
        assert directory.canonical_city("57072") == "Siegen"
        assert directory.canonical_city("57078") == "Siegen"

    def test_canonical_city_for_unknown_zip_is_none(self):
        assert directory.canonical_city("99999") is None


class TestCityMatches:
    @pytest.mark.parametrize("city", ["Siegen", "siegen", "  SIEGEN ", "sIeGeN"])
    def test_case_and_whitespace_insensitive(self, city):
        assert directory.city_matches("57072", city) is True

    def test_umlaut_city(self):
        assert directory.city_matches("57339", "erndtebrück") is True

    def test_wrong_city_for_zip(self):
        assert directory.city_matches("57072", "Kreuztal") is False

    def test_unknown_zip_never_matches(self):
        assert directory.city_matches("99999", "Siegen") is False
