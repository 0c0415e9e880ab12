from datetime import date

import pytest

from octo_connector.domain.errors import ValidationError
from octo_connector.domain.value_objects import (
    API_KEY_PATTERN,
    Credential,
    to_local_date,
    token_template,
    wildcard_match,
)
from octo_connector.domain.value_objects.local_date import moment_to_strptime


class TestLocalDate:
    @pytest.mark.parametrize(
        "value,date_format,expected",
        [
            ("01/12/2026", "DD/MM/YYYY", "2026-12-01"),
            ("12/01/2026", "MM/DD/YYYY", "2026-12-01"),
            ("2026-12-01", None, "2026-12-01"),
            ("1.12.26", "D.M.YY", "2026-12-01"),
        ],
    )
    def test_to_local_date(self, value, date_format, expected):
        assert to_local_date(value, date_format) == expected

    @pytest.mark.parametrize(
        "value",
        ["2026-12-01T00:00:00.000Z", "2026-12-01T09:30:00", "2026-12-01T23:59:59-07:00"],
    )
    def test_iso_datetimes_keep_their_written_date(self, value):
        assert to_local_date(value) == "2026-12-01"

    @pytest.mark.parametrize(
        "value,date_format",
        [
            ("01/12/2026 10:00", "DD/MM/YYYY"),
            ("01/12/2026T10:00:00Z", "DD/MM/YYYY"),
            (" 1/12/2026", "D/M/YYYY"),
            ("2026-12-01T00:00:00.000Z", "YYYY-MM-DD"),
        ],
    )
    def test_trailing_text_after_the_format_is_ignored(self, value, date_format):
        assert to_local_date(value, date_format) == "2026-12-01"

    def test_value_must_start_with_the_format(self):
        with pytest.raises(ValidationError):
            to_local_date("on 01/12/2026", "DD/MM/YYYY")

    def test_non_string_value(self):
        with pytest.raises(ValidationError):
            to_local_date(20261201, "YYYYMMDD")

    def test_date_objects_pass_through(self):
        assert to_local_date(date(2026, 12, 1)) == "2026-12-01"

    def test_moment_to_strptime(self):
        assert moment_to_strptime("DD/MM/YYYY HH:mm") == "%d/%m/%Y %H:%M"

    def test_invalid_date_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            to_local_date("31/02/2026", "DD/MM/YYYY", field="startDate")
        assert exc_info.value.field == "startDate"

    def test_missing_date(self):
        with pytest.raises(ValidationError):
            to_local_date(None, "DD/MM/YYYY")


class TestWildcard:
    @pytest.mark.parametrize(
        "pattern,value,expected",
        [
            ("*Bike*", "Bike Rental - OCTO", True),
            ("*bike*", "Bike Rental - OCTO", True),
            ("Bike*", "Bike Rental - OCTO", True),
            ("Bike", "Bike Rental - OCTO", False),
            ("*Kayak*", "Bike Rental - OCTO", False),
            ("Bike Rental (OCTO)", "Bike Rental (OCTO)", True),
            ("a.c", "abc", False),
            ("*", "", True),
        ],
    )
    def test_wildcard_match(self, pattern, value, expected):
        assert wildcard_match(pattern, value) is expected

    def test_non_string_value_never_matches(self):
        assert wildcard_match("*", None) is False
        assert wildcard_match("*", 5) is False


class TestCredential:
    def test_well_formed(self):
        assert Credential("5d3c1b2a-9f8e-4d7c-8b6a-1e2f3a4b5c6d").is_well_formed()
        assert not Credential("not-a-uuid").is_well_formed()
        assert not Credential(None).is_well_formed()

    def test_from_token(self):
        assert Credential.from_token({"apiKey": "abc"}).api_key == "abc"
        assert Credential.from_token(None).api_key is None

    def test_token_template(self):
        template = token_template()
        assert template["apiKey"]["type"] == "text"
        assert template["apiKey"]["regExp"] is API_KEY_PATTERN
        assert "uuid" in template["apiKey"]["description"]
