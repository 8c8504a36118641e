import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Logging
BENEFIT_DAYS_LOG_LEVEL = os.getenv("BENEFIT_DAYS_LOG_LEVEL", "WARNING").upper()

# Resolver multi-campo
# Pre-filtro de palabras clave: evita parsear campos sin vocabulario de días.
DAY_KEYWORD_PREFILTER = (
    os.getenv("DAY_KEYWORD_PREFILTER", "true").lower() == "true"
)
# Un candidato con confianza menor a este ratio de la acumulada se descarta.
LOW_CONFIDENCE_RATIO = float(os.getenv("LOW_CONFIDENCE_RATIO", "0.7"))

# Validaciones
if not 0.0 <= LOW_CONFIDENCE_RATIO <= 1.0:
    raise ValueError(
        "LOW_CONFIDENCE_RATIO debe estar entre 0 y 1 "
        f"(valor actual: {LOW_CONFIDENCE_RATIO})"
    )

# La librería no instala handlers; solo ajusta el nivel de su logger raíz.
logging.getLogger("benefit_days").setLevel(
    getattr(logging, BENEFIT_DAYS_LOG_LEVEL, logging.WARNING)
)
