from .normalizar import (
    format_days,
    get_day_indicators,
    normalize_benefit_days,
    parse_day_codes,
)

__all__ = [
    "format_days",
    "get_day_indicators",
    "normalize_benefit_days",
    "parse_day_codes",
]
