"""Tests for the seeded sample records."""

from datetime import date, datetime

from coursework.application import sample_data


class TestGroceryExpiry:

    def test_rice_keeps_day_of_month(self):
        rice = sample_data.groceries(datetime(2026, 1, 30, 8, 0))[0]
        assert rice.expiry_date == date(2027, 1, 30)

    def test_leap_day_clamps_to_month_end(self):
        rice = sample_data.groceries(datetime(2028, 2, 29, 8, 0))[0]
        assert rice.expiry_date == date(2029, 2, 28)

    def test_short_shelf_life_items(self, now):
        milk, bread = sample_data.groceries(now)[1:]
        assert milk.expiry_date == date(2026, 1, 22)
        assert bread.expiry_date == date(2026, 1, 17)
