from __future__ import annotations

from typing import Literal

QuizLevel = Literal["basic", "advanced"]

LEVEL_BASIC: QuizLevel = "basic"
LEVEL_ADVANCED: QuizLevel = "advanced"
LEVEL_ORDER: tuple[QuizLevel, ...] = (LEVEL_BASIC, LEVEL_ADVANCED)

PASS_THRESHOLD_PERCENT = 70


def other_level(level: QuizLevel) -> QuizLevel:
    if level == LEVEL_BASIC:
        return LEVEL_ADVANCED
    if level == LEVEL_ADVANCED:
        return LEVEL_BASIC
    raise ValueError(f"unknown quiz level: {level!r}")
