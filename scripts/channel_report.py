from __future__ import annotations

import argparse
import json
import os
from datetime import date
from typing import Optional

from bookingboost.api.dependencies import get_channel_analytics_service
from bookingboost.core.errors import AppError
from bookingboost.core.logging import configure_logging
from bookingboost.schemas.analytics import AnalyticsFilters, DashboardSummary
from bookingboost.shared.currency import format_currency, format_percentage


def load_env_file(env_path: str) -> None:
    if not os.path.exists(env_path):
        return
    with open(env_path, "r", encoding="utf-8") as env_file:
        for line in env_file:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key, value)


def parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value)


def render_text(summary: DashboardSummary, currency: str) -> str:
    lines = [
        f"Bookings: {summary.total_bookings}",
        f"Revenue: {format_currency(summary.total_revenue, currency)}"
        f" ({format_percentage(summary.revenue_change_percentage)} vs previous period)",
        f"Direct share: {format_percentage(summary.direct_percentage)}"
        f" [{summary.health.status.upper()}] {summary.health.message}",
        f"OTA commissions: {format_currency(summary.ota_commissions, currency)}",
        f"Savings at {format_percentage(summary.direct_booking_goal, 0)} direct:"
        f" {format_currency(summary.savings.monthly, currency)}/month,"
        f" {format_currency(summary.savings.annual, currency)}/year",
        "",
        "Channels:",
    ]
    for stat in summary.channels:
        lines.append(
            f"  {stat.emoji} {stat.channel}: {stat.bookings} bookings,"
            f" {format_currency(stat.revenue, currency)} ({format_percentage(stat.percentage)}),"
            f" commission {format_currency(stat.commission_paid, currency)}"
        )
    return "\n".join(lines)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the channel performance report for one hotel.")
    parser.add_argument("hotel_id", help="Hotel id in the hotels table.")
    parser.add_argument("--time-window", default="90d", help="Rolling window such as 30d or 6m.")
    parser.add_argument("--start-date", default=None, help="ISO start date; overrides --time-window.")
    parser.add_argument("--end-date", default=None, help="ISO end date; overrides --time-window.")
    parser.add_argument("--json", action="store_true", help="Emit the camelCase JSON payload.")
    parser.add_argument(
        "--env-file",
        default=os.path.join(os.path.dirname(__file__), "..", ".env"),
        help="Path to .env file.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    load_env_file(os.path.abspath(args.env_file))
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))

    filters = AnalyticsFilters(
        time_window=args.time_window,
        start_date=parse_date(args.start_date),
        end_date=parse_date(args.end_date),
    )
    service = get_channel_analytics_service()
    try:
        summary, context = service.get_dashboard(args.hotel_id, filters)
    except AppError as exc:
        raise SystemExit(f"{exc.code}: {exc.message}") from exc
    if args.json:
        print(json.dumps(summary.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
        return
    print(f"Hotel {context.hotel_id} ({context.time_window}, {context.currency})")
    print(render_text(summary, context.currency))


if __name__ == "__main__":
    main()
