from collections.abc import Mapping
from typing import Any, Optional

from ..models.day_availability import DayAvailability
from ..models.queries_types import DAY_ABBREVIATIONS, DAY_DISPLAY_NAMES, WEEK_DAYS
from ..parser import (
    get_available_day_names,
    parse_day_availability,
    parse_day_availability_from_benefit,
)

# Códigos numéricos de día que usan las APIs de beneficios (1 = lunes)
DAYS_MAP = {
    "1": "monday",
    "2": "tuesday",
    "3": "wednesday",
    "4": "thursday",
    "5": "friday",
    "6": "saturday",
    "7": "sunday",
}

ALL_DAYS_CODE = "1234567"


def _get(benefit: Any, name: str) -> Any:
    if isinstance(benefit, Mapping):
        return benefit.get(name)
    return getattr(benefit, name, None)


def parse_day_codes(raw: Any) -> Optional[DayAvailability]:
    """
    Convierte un código de días ("1234567", "67", "15") en DayAvailability.

    Solo el código completo "1234567" significa "todos los días";
    los caracteres que no son días se ignoran.
    """
    if raw is None:
        return None
    code = str(raw).strip()
    if code == ALL_DAYS_CODE:
        return DayAvailability.every_day()
    days = [DAYS_MAP[c] for c in code if c in DAYS_MAP]
    return DayAvailability.from_days(days) if days else None


def format_days(availability: DayAvailability) -> str:
    names = get_available_day_names(availability)
    if names:
        return ", ".join(names)
    return availability.custom_text or ""


def get_day_indicators(availability: DayAvailability) -> list[dict]:
    """Una fila por día para la tira L M X J V S D de la UI."""
    return [
        {
            "dia": day,
            "abreviatura": DAY_ABBREVIATIONS[day],
            "nombre": DAY_DISPLAY_NAMES[day],
            "disponible": getattr(availability, day),
        }
        for day in WEEK_DAYS
    ]


def normalize_benefit_days(benefit: Any, codes_field: str = "a") -> dict:
    """
    Normaliza la información de días de un beneficio a formato legible.

    Orden de resolución: campos de texto (multi-campo), código numérico
    de días, y por último el texto de "cuando" tal cual.
    """
    availability = parse_day_availability_from_benefit(benefit)
    if availability is None and benefit is not None:
        availability = parse_day_codes(_get(benefit, codes_field))
    if availability is None and benefit is not None:
        availability = parse_day_availability(_get(benefit, "cuando"))

    if availability is None:
        return {"dias": None, "disponibilidad": None, "indicadores": []}

    return {
        "dias": format_days(availability),
        "disponibilidad": availability.model_dump(by_alias=True),
        "indicadores": get_day_indicators(availability),
    }
