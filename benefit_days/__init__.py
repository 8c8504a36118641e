"""
benefit_days - Interpretación de los días de validez de beneficios bancarios.

Exports principales:
    parse_day_availability              → texto → DayAvailability (con fallback custom_text)
    parse_day_availability_enhanced     → texto → DayParseResult (disponibilidad + match)
    get_pattern_confidence              → confianza del match, 0 si no hay
    parse_multi_field_day_availability  → combina condicion/requisitos/cuando/textoAplicacion
    parse_day_availability_from_benefit → idem, desde un beneficio arbitrario
    has_any_day_available, get_available_day_names → helpers de visualización
    DayAvailability, PatternMatch, DayParseResult, BenefitDayInfo → modelos de datos
"""

from . import config  # noqa: F401  (carga .env y nivel de logging)
from .models import (
    BenefitDayInfo,
    DayAvailability,
    DayParseResult,
    FieldParsingResult,
    PatternMatch,
)
from .parser import (
    contains_day_keywords,
    get_available_day_names,
    get_pattern_confidence,
    has_any_day_available,
    merge_day_availability,
    parse_day_availability,
    parse_day_availability_enhanced,
    parse_day_availability_from_benefit,
    parse_multi_field_day_availability,
)

__all__ = [
    "BenefitDayInfo",
    "DayAvailability",
    "DayParseResult",
    "FieldParsingResult",
    "PatternMatch",
    "contains_day_keywords",
    "get_available_day_names",
    "get_pattern_confidence",
    "has_any_day_available",
    "merge_day_availability",
    "parse_day_availability",
    "parse_day_availability_enhanced",
    "parse_day_availability_from_benefit",
    "parse_multi_field_day_availability",
]
