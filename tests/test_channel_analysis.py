from __future__ import annotations

from datetime import date

import pytest

from bookingboost.analytics.channel_analysis import (
    DEFAULT_COMMISSION_RATES,
    analyze_channels,
    build_commission_rate_card,
    calculate_commission_bleed,
)
from bookingboost.models.bookings import CommissionRateRecord
from factories import make_booking


@pytest.fixture()
def bookings():
    return [
        make_booking("1", "Booking.com", 1000, date(2024, 5, 1)),
        make_booking("2", "Expedia", 2000, date(2024, 5, 2), commission_paid=300),
        make_booking("3", "Direct Booking", 500, date(2024, 5, 3)),
        make_booking("4", "Mystery Agent", 100, date(2024, 5, 4)),
        make_booking("5", "Thompsons Africa (New)", 400, date(2024, 5, 5), commission_rate=0.2),
    ]


def test_rate_card_overrides() -> None:
    rate_card = build_commission_rate_card(
        [
            CommissionRateRecord(channel_name="Booking.com", commission_rate=0.12, is_active=True),
            CommissionRateRecord(channel_name="Mystery Agent", commission_rate=0.05),
            CommissionRateRecord(channel_name="Agoda", commission_rate=0.3, is_active=False),
        ]
    )
    assert rate_card["Booking.com"] == 0.12
    assert rate_card["Mystery Agent"] == 0.05
    assert rate_card["Agoda"] == DEFAULT_COMMISSION_RATES["Agoda"]
    assert DEFAULT_COMMISSION_RATES["Booking.com"] == 0.15


def test_analyze_channels_uses_rate_card(bookings) -> None:
    report = analyze_channels(bookings)
    by_channel = {item.channel: item for item in report.channels}

    assert [item.channel for item in report.channels][0] == "Expedia"
    assert by_channel["Booking.com"].commission_paid == pytest.approx(150)
    assert by_channel["Booking.com"].commission_rate == 0.15
    assert by_channel["Expedia"].commission_paid == 300
    assert by_channel["Direct Booking"].commission_paid == 0
    assert by_channel["Mystery Agent"].commission_paid == 0
    assert by_channel["Mystery Agent"].commission_rate == 0
    assert by_channel["Thompsons Africa (New)"].commission_paid == pytest.approx(80)

    for item in report.channels:
        assert item.net_revenue == pytest.approx(item.total_revenue - item.commission_paid)

    summary = report.summary
    assert summary.total_bookings == 5
    assert summary.total_revenue == 4000
    assert summary.total_commissions == pytest.approx(530)
    assert summary.total_net_revenue == pytest.approx(3470)
    assert summary.avg_commission_rate == pytest.approx(13.25)


def test_analyze_channels_with_custom_rates(bookings) -> None:
    rate_card = build_commission_rate_card(
        [CommissionRateRecord(channel_name="Booking.com", commission_rate=0.10)]
    )
    report = analyze_channels(bookings, rate_card)
    booking_com = next(item for item in report.channels if item.channel == "Booking.com")
    assert booking_com.commission_paid == pytest.approx(100)


def test_chart_labels_are_truncated(bookings) -> None:
    report = analyze_channels(bookings)
    labels = [point.channel for point in report.chart_data]
    assert "Thompsons Af..." in labels
    assert "Booking.com" in labels


def test_commission_bleed(bookings) -> None:
    report = analyze_channels(bookings)
    bleed = report.commission_bleed
    assert bleed.total_lost == pytest.approx(530)
    assert bleed.percentage_lost == pytest.approx(13.25)
    assert [offender.channel for offender in bleed.biggest_offenders] == [
        "Expedia",
        "Booking.com",
        "Thompsons Africa (New)",
    ]
    assert bleed.biggest_offenders[0].percentage == pytest.approx(18)


def test_empty_inputs() -> None:
    report = analyze_channels([])
    assert report.channels == []
    assert report.summary.total_revenue == 0
    bleed = calculate_commission_bleed([])
    assert bleed.percentage_lost == 0
    assert bleed.biggest_offenders == []
