"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

INACTIVITY_THRESHOLD_DAYS = 21
DEFAULT_TABLET_NICKNAME = "Sin sobrenombre"
DEFAULT_EVENT_QUEUE_SIZE = 100
DEFAULT_HISTORY_LIMIT = 52

# Indexed by date.weekday() (Monday=0).
DAY_NAMES = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo")

MONTH_NAMES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)
