"""Order domain constants.

Tree sizes, admin-managed delivery statuses and the numeric rules of the
order lifecycle.
"""

from django.db import models


class TreeSize(models.TextChoices):
    SMALL = "small", "Klein"
    MEDIUM = "medium", "Mittel"
    LARGE = "large", "Groß"
    XL = "xl", "XL"


class OrderStatus(models.TextChoices):
    OPEN = "Offen", "Offen"
    PLANNED = "Geplant", "Geplant"
    DELIVERY_TODAY = "Lieferung heute geplant", "Lieferung heute geplant"
    COMPLETED = "Abgeschlossen", "Abgeschlossen"


# Planned delivery when the customer did not pick a date.
FALLBACK_DELIVERY_DAYS = 2

# Cancellation is refused once planned delivery is closer than this.
CANCELLATION_CUTOFF_HOURS = 24

# Seasonal cutoff (month, day) used when MAX_DELIVERY_DATE is not configured.
SEASON_END = (12, 24)

CUSTOMER_ID_LENGTH = 8
CUSTOMER_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
CUSTOMER_ID_MAX_RETRIES = 5

# Column widths shared by the model and the input checks.
NAME_MAX_LENGTH = 255
STREET_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 254
CITY_MAX_LENGTH = 100
ZIP_LENGTH = 5
