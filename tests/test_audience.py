"""format_audience tests: magnitude suffixes and the no-data marker."""

import math

import pytest

from interest_proxy.domain.audience import NO_DATA, format_audience, format_bound


class TestFormatAudience:

    def test_zero_is_no_data(self):
        assert format_audience(0, 0) == "—"

    def test_thousands(self):
        assert format_audience(1200, 5000) == "1K–5K"

    def test_billions_strip_trailing_zero(self):
        assert format_audience(2_500_000_000, 3_000_000_000) == "2.5B–3B"

    def test_billions_tie_rounds_up(self):
        assert format_audience(2_250_000_000, 3_450_000_000) == "2.3B–3.5B"

    def test_millions(self):
        assert format_audience(1_000_000, 2_000_000) == "1M–2M"

    @pytest.mark.parametrize(
        "lower, upper",
        [(None, 100), (100, None), (0, 100), (100, 0), (math.nan, 100), ("100", 200), (-5, 10)],
    )
    def test_unusable_bounds(self, lower, upper):
        assert format_audience(lower, upper) == NO_DATA

    def test_bounds_formatted_independently(self):
        assert format_audience(950, 1_500_000) == "950–2M"


class TestFormatBound:

    def test_rounds_half_up(self):
        assert format_bound(2_500_000) == "3M"
        assert format_bound(1_500) == "2K"

    def test_small_values_as_is(self):
        assert format_bound(999) == "999"
        assert format_bound(12.0) == "12"

    def test_rounding_can_reach_next_unit_label(self):
        assert format_bound(999_999) == "1000K"
