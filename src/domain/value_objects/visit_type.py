from __future__ import annotations

from enum import Enum


class VisitType(str, Enum):
    CONSULTATION = "consultation"
    VACCINATION = "vaccination"
    SURGERY = "surgery"
    EMERGENCY = "emergency"
    CHECKUP = "checkup"
