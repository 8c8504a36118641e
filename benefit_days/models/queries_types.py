"""
Query Types - Vocabulario de días de la semana.

Contiene los mapeos entre nombres de días en español (con y sin tilde),
las claves internas de DayAvailability y los textos de visualización.
"""

# Claves internas en orden de semana (lunes = 1 ... domingo = 7)
WEEK_DAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

WEEKDAY_KEYS = WEEK_DAYS[:5]
WEEKEND_KEYS = WEEK_DAYS[5:]

# Mapeo de nombres de días a números (1 = lunes)
DAYS_OF_THE_WEEK = {
    "lunes": 1,
    "martes": 2,
    "miercoles": 3,
    "miércoles": 3,
    "jueves": 4,
    "viernes": 5,
    "sabado": 6,
    "sabados": 6,
    "sábado": 6,
    "sábados": 6,
    "domingo": 7,
    "domingos": 7,
}

# Nombres para mostrar en la UI
DAY_DISPLAY_NAMES = {
    "monday": "Lunes",
    "tuesday": "Martes",
    "wednesday": "Miércoles",
    "thursday": "Jueves",
    "friday": "Viernes",
    "saturday": "Sábado",
    "sunday": "Domingo",
}

# Abreviaturas de una letra (X = miércoles para no chocar con martes)
DAY_ABBREVIATIONS = {
    "monday": "L",
    "tuesday": "M",
    "wednesday": "X",
    "thursday": "J",
    "friday": "V",
    "saturday": "S",
    "sunday": "D",
}

ALL_DAYS_LABEL = "Todos los días"
