from __future__ import annotations

from enum import Enum


class PetSpecies(str, Enum):
    DOG = "dog"
    CAT = "cat"
    BIRD = "bird"
    RABBIT = "rabbit"
    HAMSTER = "hamster"
    OTHER = "other"


class PetGender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class PetTemperament(str, Enum):
    CALM = "calm"
    NERVOUS = "nervous"
    AGGRESSIVE = "aggressive"
    FRIENDLY = "friendly"
    UNKNOWN = "unknown"
