"""
Models package - Modelos de datos del parser de días.

Contiene:
- queries_types: Vocabulario de días (nombres, números, abreviaturas)
- day_availability: Modelos Pydantic del resultado del parser
- benefit: Campos de texto de un beneficio y su prioridad
"""

from .benefit import FIELD_PRIORITY, BenefitDayInfo
from .day_availability import (
    DayAvailability,
    DayParseResult,
    FieldParsingResult,
    PatternMatch,
)
from .queries_types import (
    ALL_DAYS_LABEL,
    DAY_ABBREVIATIONS,
    DAY_DISPLAY_NAMES,
    DAYS_OF_THE_WEEK,
    WEEK_DAYS,
)

__all__ = [
    "FIELD_PRIORITY",
    "BenefitDayInfo",
    "DayAvailability",
    "DayParseResult",
    "FieldParsingResult",
    "PatternMatch",
    "ALL_DAYS_LABEL",
    "DAY_ABBREVIATIONS",
    "DAY_DISPLAY_NAMES",
    "DAYS_OF_THE_WEEK",
    "WEEK_DAYS",
]
