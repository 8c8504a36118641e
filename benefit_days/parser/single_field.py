"""
Single-Field Parser - Interpreta un texto libre en español que describe
qué días aplica un beneficio ("válido solo fines de semana",
"excepto domingos", "lunes a viernes de 9 a 17hs").

Las reglas se evalúan en orden y gana la primera que reconoce el texto:
el orden codifica prioridad. Primero las restricciones explícitas, luego
negaciones, rangos con horario, fines de semana, días hábiles y recién
después "todos los días".
"""

# Standard library imports
from typing import Callable, Iterable, Optional

# Local imports
from ..models.day_availability import DayAvailability, DayParseResult, PatternMatch
from ..models.queries_types import (
    ALL_DAYS_LABEL,
    DAY_DISPLAY_NAMES,
    WEEK_DAYS,
    WEEKDAY_KEYS,
    WEEKEND_KEYS,
)
from . import patterns
from .confidence import PatternCategory, calculate_confidence

_RESTRICTION_PATTERNS = (
    patterns.ONLY_VALID,
    patterns.WEEKEND_ONLY,
    patterns.WEEKDAY_ONLY,
    patterns.WEEKEND_RESTRICTION,
    patterns.WEEKDAY_RESTRICTION,
)


def detect_restriction(text: str) -> bool:
    """True si el texto usa lenguaje de exclusividad ("válido solo")."""
    return any(pattern.search(text) for pattern in _RESTRICTION_PATTERNS)


def detect_negation(text: str) -> bool:
    """True si el texto usa lenguaje de exclusión ("no válido", "excepto")."""
    return bool(patterns.NOT_VALID.search(text) or patterns.EXCEPT_DAYS.search(text))


def _build(
    text: str,
    availability: DayAvailability,
    pattern: str,
    category: PatternCategory,
    is_restriction: bool,
    is_negation: bool = False,
) -> DayParseResult:
    match = PatternMatch(
        pattern=pattern,
        confidence=calculate_confidence(text, category),
        is_restriction=is_restriction,
        is_negation=is_negation,
    )
    return DayParseResult(availability=availability, match=match)


def _build_days(
    text: str, days: Iterable[str], pattern: str, category: PatternCategory
) -> DayParseResult:
    """Match sin regla dedicada: la restricción se detecta por separado."""
    return _build(
        text,
        DayAvailability.from_days(days),
        pattern,
        category,
        is_restriction=detect_restriction(text),
    )


# =========================
# Rules
# =========================


def _enhanced_restrictions(text: str) -> Optional[DayParseResult]:
    only_valid = patterns.ONLY_VALID.search(text) is not None

    if patterns.WEEKEND_RESTRICTION.search(text) or (
        only_valid and patterns.WEEKEND_ONLY.search(text)
    ):
        return _build(
            text,
            DayAvailability.from_days(WEEKEND_KEYS),
            "weekendRestriction",
            PatternCategory.RESTRICTION,
            is_restriction=True,
        )

    if patterns.WEEKDAY_RESTRICTION.search(text) or (
        only_valid and patterns.WEEKDAY_ONLY.search(text)
    ):
        return _build(
            text,
            DayAvailability.from_days(WEEKDAY_KEYS),
            "weekdayRestriction",
            PatternCategory.RESTRICTION,
            is_restriction=True,
        )

    # "todos los martes" habla de un único día, no de "todos los días"
    every = patterns.EVERY_SPECIFIC_DAY.search(text)
    if every:
        day = patterns.day_key(every.group(1))
        if day:
            return _build(
                text,
                DayAvailability.from_days((day,)),
                "allDaysSpecificDay",
                PatternCategory.SPECIFIC,
                is_restriction=True,
            )

    if only_valid:
        days = patterns.referenced_days(text)
        if days:
            return _build(
                text,
                DayAvailability.from_days(days),
                "onlyValidSpecificDays",
                PatternCategory.RESTRICTION,
                is_restriction=True,
            )

    return None


def _days_after(text: str, marker) -> list[str]:
    found = marker.search(text)
    if not found:
        return []
    return patterns.referenced_days(text[found.end():])


def _days_before(text: str, marker) -> list[str]:
    found = marker.search(text)
    if not found:
        return []
    return patterns.referenced_days(text[: found.start()])


def _negations(text: str) -> Optional[DayParseResult]:
    if not detect_negation(text):
        return None

    excluded = _days_after(text, patterns.EXCEPT)
    if excluded:
        name = "exceptDay" if len(excluded) == 1 else "exceptMultipleDays"
    else:
        excluded = _days_after(text, patterns.NOT_VALID)
        name = "notValidDays"

    # "domingos no válido": el marcador cierra la frase. "excepto" siempre
    # mira hacia adelante ("lunes a viernes excepto feriados").
    if not excluded and not patterns.EXCEPT.search(text):
        excluded = _days_before(text, patterns.NOT_VALID)

    # Negación sin días nombrados: que la resuelva otra regla
    if not excluded:
        return None

    # Excluir días es exclusivo sobre el resto de la semana
    return _build(
        text,
        DayAvailability.every_day().without(excluded),
        name,
        PatternCategory.NEGATION,
        is_restriction=True,
        is_negation=True,
    )


def _time_based_range(text: str) -> Optional[DayParseResult]:
    found = patterns.DAY_TIME_RANGE.search(text)
    if not found:
        return None
    start = patterns.day_key(found.group(1))
    end = patterns.day_key(found.group(2))
    if not (start and end):
        return None
    return _build_days(
        text,
        patterns.day_range_days(start, end),
        "timeBasedRange",
        PatternCategory.TIME_RANGE,
    )


def _weekends(text: str) -> Optional[DayParseResult]:
    if not patterns.WEEKENDS.search(text):
        return None
    return _build_days(text, WEEKEND_KEYS, "weekends", PatternCategory.CONTEXT)


def _weekdays(text: str) -> Optional[DayParseResult]:
    if not patterns.WEEKDAYS.search(text):
        return None
    return _build_days(text, WEEKDAY_KEYS, "weekdays", PatternCategory.CONTEXT)


def _all_days(text: str) -> Optional[DayParseResult]:
    if not patterns.ALL_DAYS.search(text):
        return None
    return _build(
        text,
        DayAvailability.every_day(),
        "allDays",
        PatternCategory.GENERAL,
        is_restriction=detect_restriction(text),
    )


def _named_range(text: str) -> Optional[DayParseResult]:
    found = patterns.named_range(text)
    if not found:
        return None
    _, days = found
    return _build_days(text, days, "dayRange", PatternCategory.RANGE)


def _specific_days(text: str) -> Optional[DayParseResult]:
    days = patterns.mentioned_days(text)
    if not days:
        return None
    return _build_days(text, days, "specificDays", PatternCategory.SPECIFIC)


_RULES: tuple[Callable[[str], Optional[DayParseResult]], ...] = (
    _enhanced_restrictions,
    _negations,
    _time_based_range,
    _weekends,
    _weekdays,
    _all_days,
    _named_range,
    _specific_days,
)


# =========================
# Public API
# =========================


def parse_day_availability_enhanced(
    text: Optional[str] = None,
) -> Optional[DayParseResult]:
    """
    Parsea un texto y devuelve la disponibilidad junto con la metadata
    del patrón que la produjo.

    Args:
        text: Texto en español sobre los días en que aplica el beneficio

    Returns:
        DayParseResult, o None si el texto está vacío o ningún patrón coincide
    """
    if not isinstance(text, str) or not text.strip():
        return None

    normalized = text.strip().lower()
    for rule in _RULES:
        result = rule(normalized)
        if result is not None:
            return result
    return None


def parse_day_availability(text: Optional[str] = None) -> Optional[DayAvailability]:
    """
    Versión compatible: devuelve solo la disponibilidad.

    Si el texto no vacío no coincide con ningún patrón, devuelve todos los
    días en False con custom_text = texto original, para que la UI lo
    muestre tal cual.
    """
    result = parse_day_availability_enhanced(text)
    if result is not None:
        return result.availability

    if isinstance(text, str) and text.strip():
        return DayAvailability.unmatched(text)

    return None


def get_pattern_confidence(text: Optional[str] = None) -> float:
    result = parse_day_availability_enhanced(text)
    return result.match.confidence if result else 0


def has_any_day_available(availability: DayAvailability) -> bool:
    return availability.all_days or bool(availability.days)


def get_available_day_names(availability: DayAvailability) -> list[str]:
    """Nombres en español de los días disponibles, en orden de semana."""
    if availability.all_days:
        return [ALL_DAYS_LABEL]
    return [DAY_DISPLAY_NAMES[day] for day in WEEK_DAYS if getattr(availability, day)]
