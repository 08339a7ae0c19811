from __future__ import annotations

from enum import Enum


class ServiceType(str, Enum):
    GROOMING = "grooming"
    VETERINARY = "veterinary"
