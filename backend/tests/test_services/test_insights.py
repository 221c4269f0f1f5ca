"""Tests for the secondary calendar views."""

from datetime import date
from decimal import Decimal

import pytest

from rental_calendar.models import Article, Client, ReservationStatus
from rental_calendar.schemas import RevenueTier
from rental_calendar.services.calendar_grid import build_month
from rental_calendar.services.insights import (
    UNKNOWN_CLIENT,
    billable_days,
    client_name,
    client_names,
    day_badges,
    estimate_total_price,
    monthly_report,
    revenue_tier,
    split_visible,
    upcoming_reservations,
)

TODAY = date(2024, 3, 15)


class TestRevenueTier:
    @pytest.mark.parametrize(
        ("revenue", "tier"),
        [
            (Decimal("0"), RevenueTier.NONE),
            (Decimal("999.99"), RevenueTier.LOW),
            (Decimal("1000"), RevenueTier.MEDIUM),
            (Decimal("4999"), RevenueTier.MEDIUM),
            (Decimal("5000"), RevenueTier.HIGH),
        ],
    )
    def test_thresholds(self, revenue, tier):
        assert revenue_tier(revenue, Decimal("1000"), Decimal("5000")) is tier


class TestUpcomingReservations:
    def test_sorted_and_limited(self, make_reservation):
        later = make_reservation(date(2024, 4, 1), date(2024, 4, 2))
        sooner = make_reservation(date(2024, 3, 20), date(2024, 3, 21))
        starting_today = make_reservation(TODAY, TODAY)
        past = make_reservation(date(2024, 3, 1), date(2024, 3, 20))

        result = upcoming_reservations([later, sooner, past, starting_today], today=TODAY, limit=2)

        assert result == [starting_today, sooner]

    def test_cancelled_excluded(self, make_reservation):
        r = make_reservation(date(2024, 4, 1), date(2024, 4, 2), status=ReservationStatus.CANCELLED)
        assert upcoming_reservations([r], today=TODAY) == []


class TestSplitVisible:
    def test_folds_extra_reservations(self, make_reservation):
        rs = [make_reservation(date(2024, 3, 5), date(2024, 3, 5)) for _ in range(4)]
        view = build_month(2024, 3, rs, today=TODAY)
        day = next(d for d in view.days if d.date == date(2024, 3, 5))

        visible, hidden = split_visible(day, limit=2)

        assert visible == rs[:2]
        assert hidden == 2

    def test_nothing_hidden_below_limit(self, make_reservation):
        r = make_reservation(date(2024, 3, 5), date(2024, 3, 5))
        view = build_month(2024, 3, [r], today=TODAY)
        day = next(d for d in view.days if d.date == date(2024, 3, 5))

        assert split_visible(day) == ([r], 0)


class TestDayBadges:
    def test_badges_only_for_booked_current_month_days(self, make_reservation):
        rs = [
            make_reservation(date(2024, 3, 5), date(2024, 3, 5), total_price=3000)
            for _ in range(3)
        ]
        spill = make_reservation(date(2024, 2, 26), date(2024, 2, 26), total_price=10)
        view = build_month(2024, 3, [*rs, spill], today=TODAY)

        badges = day_badges(view, Decimal("1000"), Decimal("5000"), visible_limit=2)

        assert list(badges) == [date(2024, 3, 5)]
        badge = badges[date(2024, 3, 5)]
        assert badge.revenue_tier is RevenueTier.HIGH
        assert badge.visible_reservation_ids == [rs[0].id, rs[1].id]
        assert badge.hidden_count == 1

    def test_empty_month_has_no_badges(self):
        view = build_month(2024, 3, [], today=TODAY)
        assert day_badges(view, Decimal("1000"), Decimal("5000")) == {}


class TestClientNames:
    def test_lookup_with_fallback(self):
        names = client_names([Client(id=1, name="Amina Bensalem")])
        assert client_name(names, 1) == "Amina Bensalem"
        assert client_name(names, 2) == UNKNOWN_CLIENT


class TestMonthlyReport:
    def test_report_uses_start_month(self, make_reservation):
        owned = make_reservation(date(2024, 3, 30), date(2024, 4, 2), total_price=400)
        spill = make_reservation(date(2024, 2, 28), date(2024, 3, 2), total_price=100)

        report = monthly_report(2024, 3, [owned, spill], "DZD")

        assert report.label == "March 2024"
        assert report.currency == "DZD"
        assert report.reservations == [owned]
        assert report.stats.total_reservations == 1
        assert report.stats.total_revenue == Decimal("400")


class TestPriceEstimate:
    ARTICLES = [
        Article(id=1, name="Chair", quantity_total=100, price_per_day=Decimal("50")),
        Article(id=2, name="Tent", quantity_total=5, price_per_day=Decimal("2000")),
        Article(id=3, name="Free sample", quantity_total=5),
    ]

    def test_billable_days(self):
        assert billable_days(date(2024, 3, 1), date(2024, 3, 1)) == 1
        assert billable_days(date(2024, 3, 1), date(2024, 3, 4)) == 3

    def test_estimate(self):
        total = estimate_total_price({1: 10, 2: 1}, self.ARTICLES, date(2024, 3, 1), date(2024, 3, 3))
        assert total == Decimal("5000")  # (500 + 2000) * 2

    def test_unpriced_and_unknown_articles_are_free(self):
        total = estimate_total_price({3: 2, 99: 1}, self.ARTICLES, date(2024, 3, 1), date(2024, 3, 1))
        assert total == 0
