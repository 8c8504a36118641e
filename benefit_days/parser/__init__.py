"""
Parser package - Interpretación de días de validez de beneficios.

Contiene:
- patterns: Biblioteca de expresiones regulares en español
- confidence: Puntaje de confianza por patrón
- single_field: Parser de un único texto
- multi_field: Resolver que combina los campos de un beneficio
"""

from .confidence import PatternCategory, calculate_confidence
from .multi_field import (
    contains_day_keywords,
    merge_day_availability,
    parse_day_availability_from_benefit,
    parse_multi_field_day_availability,
)
from .single_field import (
    detect_negation,
    detect_restriction,
    get_available_day_names,
    get_pattern_confidence,
    has_any_day_available,
    parse_day_availability,
    parse_day_availability_enhanced,
)

__all__ = [
    "PatternCategory",
    "calculate_confidence",
    "contains_day_keywords",
    "merge_day_availability",
    "parse_day_availability_from_benefit",
    "parse_multi_field_day_availability",
    "detect_negation",
    "detect_restriction",
    "get_available_day_names",
    "get_pattern_confidence",
    "has_any_day_available",
    "parse_day_availability",
    "parse_day_availability_enhanced",
]
