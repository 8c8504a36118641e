"""
Confidence - Puntaje heurístico (0-1) para cada patrón reconocido.
"""

from enum import Enum

from .patterns import RESTRICTION_KEYWORDS


class PatternCategory(str, Enum):
    """Categorías de patrón, cada una con su puntaje base."""
    RESTRICTION = "restriction"
    NEGATION = "negation"
    SPECIFIC = "specific"
    RANGE = "range"
    CONTEXT = "context"
    TIME_RANGE = "time_range"
    GENERAL = "general"


BASE_SCORES = {
    PatternCategory.RESTRICTION: 0.90,  # "válido solo", "aplicable únicamente"
    PatternCategory.NEGATION: 0.85,  # "no válido", "excepto"
    PatternCategory.SPECIFIC: 0.80,  # días puntuales
    PatternCategory.RANGE: 0.75,  # "lunes a miércoles"
    PatternCategory.CONTEXT: 0.70,  # "fines de semana", "días hábiles"
    PatternCategory.TIME_RANGE: 0.65,  # "lunes a viernes de 9 a 17hs"
    PatternCategory.GENERAL: 0.60,  # "todos los días"
}

KEYWORD_BOOST = 0.03
MAX_CONFIDENCE = 0.98
LONG_TEXT_THRESHOLD = 100
LONG_TEXT_PENALTY = 0.9


def calculate_confidence(text: str, category: PatternCategory) -> float:
    """
    Calcula la confianza de un match.

    Args:
        text: Texto analizado (ya normalizado)
        category: Categoría del patrón que lo reconoció

    Returns:
        Confianza redondeada a 2 decimales
    """
    confidence = BASE_SCORES[category]

    # Cada palabra de restricción adicional refuerza el match
    keywords = len(RESTRICTION_KEYWORDS.findall(text))
    if keywords > 1:
        confidence = min(MAX_CONFIDENCE, confidence + KEYWORD_BOOST * (keywords - 1))

    # Texto largo suele traer otro contexto que diluye el patrón
    if len(text) > LONG_TEXT_THRESHOLD:
        confidence *= LONG_TEXT_PENALTY

    return round(confidence, 2)
