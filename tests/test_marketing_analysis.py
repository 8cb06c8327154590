from __future__ import annotations

from datetime import date

import pytest

from bookingboost.analytics.marketing import calculate_marketing_roi, process_marketing_metrics
from bookingboost.models.bookings import MarketingMetricRecord


def _metric(day: int, source: str, metric_type: str, value) -> MarketingMetricRecord:
    return MarketingMetricRecord.model_validate(
        {"date": date(2024, 6, day).isoformat(), "source": source, "metric_type": metric_type, "value": value}
    )


@pytest.fixture()
def metrics():
    return [
        _metric(1, "google_ads", "spend", 100),
        _metric(1, "google_ads", "clicks", 50),
        _metric(1, "google_ads", "conversions", 4),
        _metric(1, "google_ads", "impressions", 1000),
        _metric(1, "meta_ads", "spend", 60),
        _metric(1, "meta_ads", "clicks", 30),
        _metric(1, "meta_ads", "conversions", 2),
        _metric(2, "google_ads", "spend", 40),
        _metric(2, "google_ads", "clicks", 20),
        _metric(2, "google_ads", "conversions", 6),
        _metric(2, "google_analytics", "sessions", 900),
    ]


def test_platform_totals(metrics) -> None:
    analysis = process_marketing_metrics(metrics)
    assert analysis.has_data is True
    platforms = {platform.platform: platform for platform in analysis.platforms}
    assert set(platforms) == {"Google Ads", "Meta Ads"}

    google = platforms["Google Ads"]
    assert google.spend == 140
    assert google.clicks == 70
    assert google.conversions == 10
    assert google.impressions == 1000
    assert google.cpc == pytest.approx(2.0)
    assert google.roi == pytest.approx(10 * 120 / 140)


def test_daily_trend_sorted_by_date(metrics) -> None:
    analysis = process_marketing_metrics(list(reversed(metrics)))
    assert [point.date for point in analysis.trend_data] == ["2024-06-01", "2024-06-02"]
    assert analysis.trend_data[0].spend == 160
    assert analysis.trend_data[1].conversions == 6


def test_later_row_replaces_same_cell() -> None:
    analysis = process_marketing_metrics(
        [
            _metric(3, "meta_ads", "spend", 10),
            _metric(3, "meta_ads", "spend", 25),
        ]
    )
    assert analysis.platforms[0].spend == 25
    assert analysis.summary.total_spend == 25


def test_summary_uses_direct_revenue(metrics) -> None:
    analysis = process_marketing_metrics(metrics, direct_revenue=800)
    summary = analysis.summary
    assert summary.total_spend == 200
    assert summary.total_clicks == 100
    assert summary.total_conversions == 12
    assert summary.blended_roi == pytest.approx(4.0)
    assert summary.cost_per_booking == pytest.approx(200 / 12)
    assert summary.direct_bookings == 4


def test_unknown_source_keeps_raw_name_and_zero_clicks() -> None:
    analysis = process_marketing_metrics([_metric(4, "tiktok_ads", "spend", 30)])
    platform = analysis.platforms[0]
    assert platform.platform == "tiktok_ads"
    assert platform.cpc == 0
    assert platform.roi == 0


def test_no_tracked_metrics_means_no_data() -> None:
    assert process_marketing_metrics([]).has_data is False
    only_sessions = process_marketing_metrics([_metric(1, "google_analytics", "sessions", 10)])
    assert only_sessions.has_data is False
    assert only_sessions.summary.total_spend == 0


def test_marketing_roi() -> None:
    assert calculate_marketing_roi(0, 5) == 0
    assert calculate_marketing_roi(240, 4) == pytest.approx(2.0)
    assert calculate_marketing_roi(100, 1, average_booking_value=300) == pytest.approx(3.0)
