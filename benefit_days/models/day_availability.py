"""
Day Availability - Modelos Pydantic del resultado del parser de días.

DayAvailability es inmutable: cada operación (unión, intersección,
exclusión) devuelve una instancia nueva. Los alias camelCase (allDays,
customText) son el formato que consume la UI.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .benefit import FIELD_PRIORITY
from .queries_types import WEEK_DAYS


class DayAvailability(BaseModel):
    """
    Disponibilidad semanal de un beneficio.

    Attributes:
        monday..sunday: True si el beneficio se puede usar ese día
        all_days: True solo cuando el texto decía "todos los días";
            nunca se infiere de tener los siete días en True
        custom_text: Texto original cuando ningún patrón reconoció días
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False
    sunday: bool = False
    all_days: bool = Field(default=False, alias="allDays")
    custom_text: Optional[str] = Field(default=None, alias="customText")

    @model_validator(mode="after")
    def _all_days_requires_every_day(self) -> DayAvailability:
        if self.all_days and not all(getattr(self, day) for day in WEEK_DAYS):
            raise ValueError("all_days requiere los siete días habilitados")
        return self

    @classmethod
    def from_days(
        cls,
        days: Iterable[str],
        all_days: bool = False,
        custom_text: Optional[str] = None,
    ) -> DayAvailability:
        enabled = set(days)
        unknown = enabled.difference(WEEK_DAYS)
        if unknown:
            raise ValueError(f"Días desconocidos: {sorted(unknown)}")
        flags = {day: day in enabled for day in WEEK_DAYS}
        return cls(**flags, all_days=all_days, custom_text=custom_text)

    @classmethod
    def every_day(cls) -> DayAvailability:
        return cls.from_days(WEEK_DAYS, all_days=True)

    @classmethod
    def unmatched(cls, text: str) -> DayAvailability:
        """Todos los días en False, conservando el texto para mostrarlo."""
        return cls(custom_text=text)

    @property
    def days(self) -> frozenset[str]:
        return frozenset(day for day in WEEK_DAYS if getattr(self, day))

    def union(self, other: DayAvailability) -> DayAvailability:
        return DayAvailability.from_days(
            self.days | other.days,
            all_days=self.all_days or other.all_days,
            custom_text=self.custom_text or other.custom_text,
        )

    def intersection(self, other: DayAvailability) -> DayAvailability:
        return DayAvailability.from_days(
            self.days & other.days,
            all_days=self.all_days and other.all_days,
            custom_text=self.custom_text or other.custom_text,
        )

    def without(self, days: Iterable[str]) -> DayAvailability:
        return DayAvailability.from_days(
            self.days.difference(days), custom_text=self.custom_text
        )


class PatternMatch(BaseModel):
    """Metadata de la regla que reconoció el texto."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    confidence: float = Field(ge=0.0, le=1.0)
    is_restriction: bool = False
    is_negation: bool = False


class DayParseResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    availability: DayAvailability
    match: PatternMatch


class FieldParsingResult(BaseModel):
    """Resultado intermedio por campo; solo vive dentro del resolver."""

    model_config = ConfigDict(frozen=True)

    field: str
    availability: DayAvailability
    confidence: float
    is_restriction: bool = False
    is_negation: bool = False
    text: str = ""

    @property
    def priority(self) -> int:
        return FIELD_PRIORITY.get(self.field, 0)
