"""
Patterns - Expresiones regulares para vocabulario de días en español.

Todas las expresiones son case-insensitive y toleran la falta de tildes
("miércoles"/"miercoles", "sábado"/"sabado"). El parser recibe el texto
ya en minúsculas, pero las expresiones no dependen de eso.
"""

# Standard library imports
import re
from typing import Optional

# Local imports
from ..models.queries_types import (
    DAYS_OF_THE_WEEK,
    WEEK_DAYS,
    WEEKDAY_KEYS,
    WEEKEND_KEYS,
)

_I = re.IGNORECASE

# =========================
# Building blocks
# =========================

_DAY_NAME = r"(lunes|martes|mi[ée]rcoles|jueves|viernes|s[áa]bados?|domingos?)"
_VALID = r"v[áa]lid[oa]s?"
_ONLY = r"s[óo]lo"
_SOLELY = r"[úu]nicamente"
_WEEKEND = r"fin(?:es)?\s+de\s+semana"
_SAT_AND_SUN = r"s[áa]bados?\s+y\s+domingos?"
_BUSINESS_DAYS = r"d[ií]as?\s+(?:h[áa]biles?|laborables?)"

# =========================
# Day names
# =========================

SPECIFIC_DAYS = {
    "monday": re.compile(r"\blunes\b", _I),
    "tuesday": re.compile(r"\bmartes\b", _I),
    "wednesday": re.compile(r"\bmi[ée]rcoles\b", _I),
    "thursday": re.compile(r"\bjueves\b", _I),
    "friday": re.compile(r"\bviernes\b", _I),
    "saturday": re.compile(r"\bs[áa]bados?\b", _I),
    "sunday": re.compile(r"\bdomingos?\b", _I),
}

# =========================
# Aggregates
# =========================

WEEKENDS = re.compile(rf"\b{_WEEKEND}\b|\b{_SAT_AND_SUN}\b", _I)
WEEKDAYS = re.compile(rf"\blunes\s+a\s+viernes\b|\b{_BUSINESS_DAYS}\b", _I)
# "permanente" y "siempre" hablan de vigencia, no de recurrencia semanal
ALL_DAYS = re.compile(r"\btod[oa]s?\s+l[oa]s?\s+d[ií]as?\b", _I)

# Rangos con nombre; fuera de estos ocho no se reconocen rangos sin horario
DAY_RANGES = (
    ("mondayToWednesday", re.compile(r"\blunes\s+a\s+mi[ée]rcoles\b", _I), 1, 3),
    ("mondayToThursday", re.compile(r"\blunes\s+a\s+jueves\b", _I), 1, 4),
    ("mondayToFriday", re.compile(r"\blunes\s+a\s+viernes\b", _I), 1, 5),
    ("tuesdayToThursday", re.compile(r"\bmartes\s+a\s+jueves\b", _I), 2, 4),
    ("wednesdayToFriday", re.compile(r"\bmi[ée]rcoles\s+a\s+viernes\b", _I), 3, 5),
    ("thursdayToSunday", re.compile(r"\bjueves\s+a\s+domingos?\b", _I), 4, 7),
    ("fridayToSunday", re.compile(r"\bviernes\s+a\s+domingos?\b", _I), 5, 7),
    ("saturdayToSunday", re.compile(r"\bs[áa]bados?\s+a\s+domingos?\b", _I), 6, 7),
)

# =========================
# Restriction / negation markers
# =========================

ONLY_VALID = re.compile(
    rf"{_VALID}\s+(?:{_ONLY}|{_SOLELY})|aplicable\s+{_SOLELY}|{_SOLELY}\s+{_VALID}", _I
)
NOT_VALID = re.compile(
    rf"\bno\s+{_VALID}\b|\bexcepto\b|\bexcluye\b|\bsin\s+validez\b|\bno\s+aplicable\b",
    _I,
)
EXCEPT = re.compile(r"\bexcepto\b", _I)
EXCEPT_DAYS = re.compile(rf"\bexcepto\s+(?:l[oa]s?\s+|el\s+)?{_DAY_NAME}", _I)

WEEKEND_ONLY = re.compile(rf"\b(?:{_ONLY}|{_SOLELY})\s+(?:los\s+)?{_WEEKEND}", _I)
WEEKDAY_ONLY = re.compile(
    rf"\b(?:{_ONLY}|{_SOLELY})\s+(?:los\s+)?{_BUSINESS_DAYS}", _I
)
WEEKEND_RESTRICTION = re.compile(
    rf"{_VALID}\s+{_ONLY}\s+{_WEEKEND}|aplicable\s+{_SOLELY}\s+{_SAT_AND_SUN}", _I
)
WEEKDAY_RESTRICTION = re.compile(
    rf"{_VALID}\s+{_ONLY}\s+{_BUSINESS_DAYS}|aplicable\s+{_SOLELY}\s+lunes\s+a\s+viernes",
    _I,
)

# "todos los martes" / "todos los días martes": un único día de la semana
EVERY_SPECIFIC_DAY = re.compile(
    rf"\btod[oa]s?\s+l[oa]s?\s+(?:d[ií]as?\s+)?{_DAY_NAME}\b", _I
)

# "lunes a viernes de 9 a 17hs": solo interesa el rango de días
DAY_TIME_RANGE = re.compile(rf"\b{_DAY_NAME}\s+a\s+{_DAY_NAME}\s+de\s+\d+", _I)

# =========================
# Scoring / pre-filter vocabulary
# =========================

RESTRICTION_KEYWORDS = re.compile(
    rf"{_VALID}\b|aplicable|{_SOLELY}|\b{_ONLY}\b", _I
)

DAY_KEYWORDS = re.compile(
    r"\blunes\b|\bmartes\b|\bmi[ée]rcoles\b|\bjueves\b|\bviernes\b"
    r"|\bs[áa]bados?\b|\bdomingos?\b|\bd[ií]as?\b|\bsemanas?\b"
    r"|\bh[áa]biles?\b|\blaborables?\b",
    _I,
)


# =========================
# Helpers
# =========================


def day_key(name: str) -> Optional[str]:
    """Convierte un nombre de día en español ("Sábados") a su clave interna."""
    number = DAYS_OF_THE_WEEK.get(name.strip().lower())
    return WEEK_DAYS[number - 1] if number else None


def day_range_days(start: str, end: str) -> tuple[str, ...]:
    """
    Días entre start y end inclusive, en orden de semana.

    Si end es anterior a start el rango da la vuelta por el domingo
    ("viernes a lunes" → viernes, sábado, domingo, lunes).
    """
    first = WEEK_DAYS.index(start)
    last = WEEK_DAYS.index(end)
    if first <= last:
        return WEEK_DAYS[first : last + 1]
    return WEEK_DAYS[first:] + WEEK_DAYS[: last + 1]


def mentioned_days(text: str) -> list[str]:
    """Días nombrados individualmente en el texto, en orden de semana."""
    return [day for day, pattern in SPECIFIC_DAYS.items() if pattern.search(text)]


def named_range(text: str) -> Optional[tuple[str, tuple[str, ...]]]:
    """Primer rango con nombre presente en el texto y sus días."""
    for name, pattern, start, end in DAY_RANGES:
        if pattern.search(text):
            return name, WEEK_DAYS[start - 1 : end]
    return None


def referenced_days(text: str) -> list[str]:
    """
    Todos los días a los que hace referencia el texto: agregados
    ("fines de semana", "días hábiles"), rangos con nombre y días sueltos.
    """
    days = set(mentioned_days(text))
    if WEEKENDS.search(text):
        days.update(WEEKEND_KEYS)
    if WEEKDAYS.search(text):
        days.update(WEEKDAY_KEYS)
    for _, pattern, start, end in DAY_RANGES:
        if pattern.search(text):
            days.update(WEEK_DAYS[start - 1 : end])
    return [day for day in WEEK_DAYS if day in days]
