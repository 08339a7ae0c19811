from __future__ import annotations

from enum import Enum


class VaccinationStatus(str, Enum):
    UP_TO_DATE = "up_to_date"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"
