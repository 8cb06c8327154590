"""Channel classification rules shared by every booking aggregation.

Lookups are ordered ``(marker, value)`` tuples matched as case-insensitive
substrings of the channel name. The first matching marker wins, so order is
part of the rule set.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from bookingboost.models.bookings import Booking


UNKNOWN_CHANNEL = "Unknown"

DIRECT_CHANNEL_MARKERS: Tuple[str, ...] = (
    "direct",
    "website",
    "phone",
    "email",
    "walk-in",
    "repeat guest",
)

DEFAULT_OTA_COMMISSION_RATE = 0.15

STANDARD_COMMISSION_RATES: Tuple[Tuple[str, float], ...] = (
    ("booking.com", 0.15),
    ("airbnb", 0.15),
    ("expedia", 0.20),
    ("agoda", 0.15),
    ("hotels.com", 0.18),
)

DIRECT_CHANNEL_EMOJI = "🌐"
DEFAULT_CHANNEL_EMOJI = "📱"

CHANNEL_EMOJIS: Tuple[Tuple[str, str], ...] = (
    ("booking.com", "🏨"),
    ("airbnb", "🏠"),
    ("expedia", "✈️"),
    ("agoda", "🛏️"),
    ("hotels.com", "🏢"),
)


class MissingCommissionPolicy(str, Enum):
    """How to treat a booking whose ``commission_paid`` was never recorded."""

    ZERO_FILL = "zero_fill"
    ESTIMATE = "estimate"


def channel_label(channel: Optional[str]) -> str:
    return channel or UNKNOWN_CHANNEL


def is_direct_channel(channel: Optional[str]) -> bool:
    channel_lower = (channel or "").lower()
    return any(marker in channel_lower for marker in DIRECT_CHANNEL_MARKERS)


def is_direct_booking(booking: Booking) -> bool:
    return bool(booking.is_direct) or is_direct_channel(booking.channel)


def _first_match(channel: Optional[str], table: Tuple[Tuple[str, object], ...], default):
    channel_lower = (channel or "").lower()
    for marker, value in table:
        if marker in channel_lower:
            return value
    return default


def get_standard_commission_rate(channel: Optional[str]) -> float:
    """Commission rate assumed for a channel when none was recorded."""
    if is_direct_channel(channel):
        return 0.0
    return _first_match(channel, STANDARD_COMMISSION_RATES, DEFAULT_OTA_COMMISSION_RATE)


def get_channel_emoji(channel: Optional[str]) -> str:
    if is_direct_channel(channel):
        return DIRECT_CHANNEL_EMOJI
    return _first_match(channel, CHANNEL_EMOJIS, DEFAULT_CHANNEL_EMOJI)


def resolve_commission(booking: Booking, policy: MissingCommissionPolicy) -> float:
    if booking.commission_paid is not None:
        return booking.commission_paid
    if policy is MissingCommissionPolicy.ESTIMATE and booking.revenue:
        return booking.revenue * get_standard_commission_rate(booking.channel)
    return 0.0
