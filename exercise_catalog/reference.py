"""
Reference Data - Fixed body part and equipment vocabularies for the UI.

These are static lists, not derived from any provider.
"""

from __future__ import annotations

from typing import List

BODY_PARTS = (
    "CHEST",
    "BACK",
    "LEGS",
    "SHOULDERS",
    "ARMS",
    "BICEPS",
    "TRICEPS",
    "FOREARMS",
    "CORE",
    "ABS",
    "GLUTES",
    "CALVES",
    "QUADRICEPS",
    "HAMSTRINGS",
    "LATS",
    "TRAPS",
    "CARDIO",
    "FULL BODY",
    "NECK",
    "ADDUCTORS",
    "ABDUCTORS",
)

EQUIPMENT = (
    "BODYWEIGHT",
    "DUMBBELL",
    "BARBELL",
    "KETTLEBELL",
    "MACHINE",
    "CABLE",
    "RESISTANCE BAND",
    "MEDICINE BALL",
    "TRX",
    "BOX",
    "PULL-UP BAR",
    "ROWER",
    "BIKE",
    "TREADMILL",
    "SLED",
    "RINGS",
    "E-Z BAR",
    "SMITH MACHINE",
    "LEVERAGE MACHINE",
    "OLYMPIC BARBELL",
    "BAND",
    "ASSISTED",
    "BOSU BALL",
    "STABILITY BALL",
)


def body_parts() -> List[str]:
    return list(BODY_PARTS)


def equipment_list() -> List[str]:
    return list(EQUIPMENT)
