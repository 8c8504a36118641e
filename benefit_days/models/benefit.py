"""
Benefit - Campos de texto de un beneficio que pueden mencionar días.

La validación estructural se hace una sola vez acá: cualquier valor con
forma incorrecta se descarta en lugar de propagarse al parser.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Prioridad de cada campo cuando la información de días se contradice
FIELD_PRIORITY = {
    "condicion": 4,
    "requisitos": 3,
    "cuando": 2,
    "textoAplicacion": 1,
}

# Nombres aceptados al leer un beneficio arbitrario (dict u objeto)
_FIELD_SOURCES = {
    "condicion": ("condicion",),
    "requisitos": ("requisitos",),
    "cuando": ("cuando",),
    "textoAplicacion": ("textoAplicacion", "texto_aplicacion"),
}


def _read(benefit: Any, names: tuple[str, ...]) -> Any:
    for name in names:
        if isinstance(benefit, Mapping):
            value = benefit.get(name)
        else:
            value = getattr(benefit, name, None)
        if value is not None:
            return value
    return None


class BenefitDayInfo(BaseModel):
    """
    Hasta cuatro campos de texto de un beneficio, todos opcionales.

    Attributes:
        condicion: Condiciones del beneficio (prioridad 4)
        requisitos: Lista de requisitos (prioridad 3)
        cuando: Texto libre "cuándo aplica" (prioridad 2)
        texto_aplicacion: Instrucciones de aplicación (prioridad 1)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    condicion: Optional[str] = None
    requisitos: Optional[list[str]] = None
    cuando: Optional[str] = None
    texto_aplicacion: Optional[str] = Field(default=None, alias="textoAplicacion")

    @field_validator("condicion", "cuando", "texto_aplicacion", mode="before")
    @classmethod
    def _text_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("requisitos", mode="before")
    @classmethod
    def _string_items_only(cls, value: Any) -> Optional[list[str]]:
        if not isinstance(value, (list, tuple)):
            return None
        return [item for item in value if isinstance(item, str) and item.strip()]

    @classmethod
    def from_benefit(cls, benefit: Any) -> BenefitDayInfo:
        """Extrae los campos de días de un dict u objeto con atributos."""
        if benefit is None:
            return cls()
        raw = {
            field: _read(benefit, names) for field, names in _FIELD_SOURCES.items()
        }
        return cls.model_validate(raw)

    def prioritized_fields(self) -> list[tuple[str, Union[str, list[str]]]]:
        """Campos presentes, de mayor a menor prioridad."""
        values = {
            "condicion": self.condicion,
            "requisitos": self.requisitos,
            "cuando": self.cuando,
            "textoAplicacion": self.texto_aplicacion,
        }
        ordered = sorted(FIELD_PRIORITY, key=FIELD_PRIORITY.get, reverse=True)
        return [(field, values[field]) for field in ordered if values[field]]
