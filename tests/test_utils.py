"""Tests for version normalization and percentage formatting."""

from tx_badge.models import Version
from tx_badge.utils import format_percentage, normalize_version


class TestNormalizeVersion:
    def test_supported_versions(self):
        for token in ["27", "35", "36", "37", "38", "39"]:
            assert normalize_version(token) == Version(token)

    def test_empty_path(self):
        assert normalize_version("") == Version.NEWEST

    def test_unknown_token(self):
        assert normalize_version("foo") == Version.NEWEST

    def test_newest(self):
        assert normalize_version("newest") == Version.NEWEST

    def test_trailing_slash_not_stripped(self):
        assert normalize_version("38/") == Version.NEWEST

    def test_unlisted_release(self):
        assert normalize_version("310") == Version.NEWEST


class TestFormatPercentage:
    def test_two_decimals(self):
        assert format_percentage(0.8732) == "87.32%"

    def test_full(self):
        assert format_percentage(1.0) == "100.00%"

    def test_zero(self):
        assert format_percentage(0) == "0.00%"

    def test_rounding(self):
        assert format_percentage(0.123456) == "12.35%"
