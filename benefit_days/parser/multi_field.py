"""
Multi-Field Resolver - Combina la información de días repartida entre
los campos de texto de un beneficio (condicion, requisitos, cuando,
textoAplicacion) en una única disponibilidad.

Reglas de combinación:
  - mismo campo (varios requisitos)      → unión
  - solo uno es restricción              → gana la restricción
  - ninguno es restricción               → unión
  - ambos restricciones, campos distintos → intersección
"""

# Standard library imports
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

# Local imports
from .. import config
from ..models.benefit import BenefitDayInfo
from ..models.day_availability import DayAvailability, FieldParsingResult
from .patterns import DAY_KEYWORDS
from .single_field import parse_day_availability_enhanced

_logger = logging.getLogger("benefit_days.resolver")


def contains_day_keywords(text: Optional[str]) -> bool:
    """Pre-filtro barato: ¿el texto tiene vocabulario de días?"""
    return isinstance(text, str) and DAY_KEYWORDS.search(text) is not None


def merge_day_availability(
    primary: DayAvailability,
    secondary: DayAvailability,
    primary_is_restriction: bool = False,
    secondary_is_restriction: bool = False,
    same_field: bool = False,
) -> DayAvailability:
    """
    Combina dos disponibilidades según su origen y si son restricciones.

    Args:
        primary: Resultado de mayor prioridad
        secondary: Resultado de menor prioridad
        primary_is_restriction: primary usa lenguaje de exclusividad
        secondary_is_restriction: secondary usa lenguaje de exclusividad
        same_field: Ambos vienen del mismo campo (se suman)

    Returns:
        Nueva DayAvailability; custom_text se conserva del lado que lo tenga
    """
    if same_field or not (primary_is_restriction or secondary_is_restriction):
        return primary.union(secondary)

    if primary_is_restriction and secondary_is_restriction:
        # Dos exclusividades independientes: solo lo que ambas permiten
        return primary.intersection(secondary)

    winner = primary if primary_is_restriction else secondary
    return DayAvailability.from_days(
        winner.days,
        all_days=winner.all_days,
        custom_text=primary.custom_text or secondary.custom_text,
    )


def _merge_results(
    accumulated: FieldParsingResult,
    candidate: FieldParsingResult,
    same_field: bool = False,
) -> FieldParsingResult:
    availability = merge_day_availability(
        accumulated.availability,
        candidate.availability,
        accumulated.is_restriction,
        candidate.is_restriction,
        same_field=same_field,
    )
    return FieldParsingResult(
        field=accumulated.field,
        availability=availability,
        confidence=max(accumulated.confidence, candidate.confidence),
        is_restriction=accumulated.is_restriction or candidate.is_restriction,
        is_negation=accumulated.is_negation or candidate.is_negation,
        text=accumulated.text,
    )


def _parse_field(field: str, text: str) -> Optional[FieldParsingResult]:
    if config.DAY_KEYWORD_PREFILTER and not contains_day_keywords(text):
        return None

    result = parse_day_availability_enhanced(text)
    if result is None:
        return None

    return FieldParsingResult(
        field=field,
        availability=result.availability,
        confidence=result.match.confidence,
        is_restriction=result.match.is_restriction,
        is_negation=result.match.is_negation,
        text=text,
    )


def _parse_requisitos(items: list[str]) -> Optional[FieldParsingResult]:
    """Cada requisito se parsea por separado y se suman entre sí."""
    merged = None
    for item in items:
        try:
            parsed = _parse_field("requisitos", item)
        except Exception as e:
            _logger.warning("Requisito descartado (%r): %s", item, e)
            continue
        if parsed is None:
            continue
        merged = parsed if merged is None else _merge_results(merged, parsed, same_field=True)
    return merged


def _collect_candidates(info: BenefitDayInfo) -> list[FieldParsingResult]:
    candidates = []
    for field, value in info.prioritized_fields():
        try:
            if field == "requisitos":
                parsed = _parse_requisitos(value)
            else:
                parsed = _parse_field(field, value)
        except Exception as e:
            _logger.warning("Campo %s descartado: %s", field, e)
            continue
        if parsed is not None:
            candidates.append(parsed)
    return candidates


def _resolve(candidates: list[FieldParsingResult]) -> Optional[DayAvailability]:
    if not candidates:
        return None

    ordered = sorted(
        candidates, key=lambda c: (c.priority, c.confidence), reverse=True
    )
    accumulated = ordered[0]

    for candidate in ordered[1:]:
        threshold = accumulated.confidence * config.LOW_CONFIDENCE_RATIO
        if candidate.confidence < threshold:
            _logger.debug(
                "Campo %s ignorado: confianza %.2f < %.2f",
                candidate.field,
                candidate.confidence,
                threshold,
            )
            continue
        try:
            accumulated = _merge_results(
                accumulated,
                candidate,
                same_field=candidate.field == accumulated.field,
            )
        except Exception as e:
            _logger.warning("No se pudo combinar el campo %s: %s", candidate.field, e)

    return accumulated.availability


def _fallback_cuando(source: Any) -> Optional[DayAvailability]:
    """Último recurso: parsear solo el campo cuando."""
    try:
        if isinstance(source, Mapping):
            cuando = source.get("cuando")
        else:
            cuando = getattr(source, "cuando", None)
        result = parse_day_availability_enhanced(cuando)
    except Exception as e:
        _logger.warning("Fallback a 'cuando' también falló: %s", e)
        return None
    return result.availability if result else None


def parse_multi_field_day_availability(
    info: Union[BenefitDayInfo, Mapping, None],
) -> Optional[DayAvailability]:
    """
    Resuelve la disponibilidad de un beneficio a partir de sus cuatro campos.

    Args:
        info: BenefitDayInfo (o un dict con los mismos campos)

    Returns:
        DayAvailability combinada, o None si ningún campo menciona días
    """
    try:
        if not isinstance(info, BenefitDayInfo):
            info = BenefitDayInfo.from_benefit(info)
        return _resolve(_collect_candidates(info))
    except Exception as e:
        _logger.warning("Resolver multi-campo falló, usando 'cuando': %s", e)
        return _fallback_cuando(info)


def parse_day_availability_from_benefit(benefit: Any) -> Optional[DayAvailability]:
    """
    Extrae los campos de días de un beneficio arbitrario (dict, modelo u
    objeto) y delega en el resolver multi-campo.
    """
    if benefit is None:
        return None
    try:
        info = BenefitDayInfo.from_benefit(benefit)
    except Exception as e:
        _logger.warning("Beneficio con formato inválido, usando 'cuando': %s", e)
        return _fallback_cuando(benefit)
    return parse_multi_field_day_availability(info)
