from __future__ import annotations

from typing import Dict, List, NamedTuple, Optional


class CurrencyInfo(NamedTuple):
    code: str
    symbol: str
    name: str


SUPPORTED_CURRENCIES: Dict[str, CurrencyInfo] = {
    info.code: info
    for info in (
        CurrencyInfo("USD", "$", "US Dollar"),
        CurrencyInfo("EUR", "€", "Euro"),
        CurrencyInfo("GBP", "£", "British Pound"),
        CurrencyInfo("CAD", "C$", "Canadian Dollar"),
        CurrencyInfo("AUD", "A$", "Australian Dollar"),
        CurrencyInfo("JPY", "¥", "Japanese Yen"),
        CurrencyInfo("CHF", "CHF", "Swiss Franc"),
        CurrencyInfo("SEK", "kr", "Swedish Krona"),
        CurrencyInfo("NOK", "kr", "Norwegian Krone"),
        CurrencyInfo("DKK", "kr", "Danish Krone"),
        CurrencyInfo("THB", "฿", "Thai Baht"),
        CurrencyInfo("SGD", "S$", "Singapore Dollar"),
        CurrencyInfo("HKD", "HK$", "Hong Kong Dollar"),
        CurrencyInfo("NZD", "NZ$", "New Zealand Dollar"),
        CurrencyInfo("MXN", "$", "Mexican Peso"),
        CurrencyInfo("BRL", "R$", "Brazilian Real"),
        CurrencyInfo("INR", "₹", "Indian Rupee"),
        CurrencyInfo("CNY", "¥", "Chinese Yuan"),
        CurrencyInfo("KRW", "₩", "South Korean Won"),
        CurrencyInfo("ZAR", "R", "South African Rand"),
    )
}

COMPACT_SUFFIXES = ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K"))


def get_currency_info(currency_code: str) -> Optional[CurrencyInfo]:
    return SUPPORTED_CURRENCIES.get(currency_code.upper())


def get_supported_currencies() -> List[CurrencyInfo]:
    return list(SUPPORTED_CURRENCIES.values())


def is_supported_currency(currency_code: str) -> bool:
    return currency_code.upper() in SUPPORTED_CURRENCIES


def get_currency_symbol(currency_code: str) -> str:
    info = get_currency_info(currency_code)
    return info.symbol if info else currency_code


def _with_symbol(body: str, amount: float, currency_code: str) -> str:
    info = get_currency_info(currency_code)
    prefix = info.symbol if info else f"{currency_code} "
    sign = "-" if amount < 0 else ""
    return f"{sign}{prefix}{body}"


def format_currency(amount: float, currency_code: str = "ZAR", fraction_digits: int = 2) -> str:
    """Symbol-prefixed amount with thousands separators, e.g. ``R1,250.00``."""
    return _with_symbol(f"{abs(amount):,.{fraction_digits}f}", amount, currency_code)


def format_currency_compact(amount: float, currency_code: str = "ZAR") -> str:
    magnitude = abs(amount)
    for threshold, suffix in COMPACT_SUFFIXES:
        if magnitude >= threshold:
            scaled = f"{magnitude / threshold:.1f}".rstrip("0").rstrip(".")
            return _with_symbol(f"{scaled}{suffix}", amount, currency_code)
    return format_currency(amount, currency_code, fraction_digits=0)


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"
