"""Tests for Settings validation."""

import calendar
from decimal import Decimal

import pytest
from pydantic import ValidationError

from rental_calendar.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.week_start == calendar.SUNDAY
        assert s.upcoming_limit == 5
        assert s.revenue_badge_low < s.revenue_badge_high

    def test_frontend_url_added_to_cors(self):
        s = Settings(_env_file=None, frontend_url="https://calendar.example.com")
        assert "https://calendar.example.com" in s.cors_origins

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("WEEK_START", "0")
        monkeypatch.setenv("RESERVATIONS_API_URL", "http://backend:5000/api/reservations")
        s = Settings(_env_file=None)
        assert s.week_start == calendar.MONDAY
        assert s.reservations_api_url == "http://backend:5000/api/reservations"

    def test_week_start_out_of_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, week_start=7)

    def test_inverted_badge_thresholds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, revenue_badge_low=Decimal("100"), revenue_badge_high=Decimal("10"))
