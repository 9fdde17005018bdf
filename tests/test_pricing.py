#!/usr/bin/env python3
"""Tests for pricing helper functions."""
from rental import CarType, RATES, calc_price


class TestCalcPrice:
    """Tests for calc_price helper function."""

    def test_short_rental_uses_daily_rate(self):
        """Under a week: days * daily rate."""
        assert calc_price(CarType.A, 3) == 300
        assert calc_price(CarType.B, 3) == 450
        assert calc_price(CarType.C, 3) == 540
        assert calc_price(CarType.D, 3) == 720

    def test_full_week_uses_weekly_rate(self):
        """Exactly 7 days costs the weekly rate, not 7 daily rates."""
        assert calc_price(CarType.A, 7) == 630
        assert calc_price(CarType.D, 7) == 1512

    def test_weeks_plus_remaining_days(self):
        assert calc_price(CarType.A, 9) == 830
        assert calc_price(CarType.A, 14) == 1260
        assert calc_price(CarType.B, 10) == 945 + 3 * 150

    def test_weekly_rate_is_discounted(self):
        for rate in RATES.values():
            assert rate.weekly < 7 * rate.daily

    def test_unknown_type_costs_nothing(self):
        assert calc_price(None, 5) == 0

    def test_zero_days(self):
        assert calc_price(CarType.C, 0) == 0
