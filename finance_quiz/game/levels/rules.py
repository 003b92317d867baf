from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from finance_quiz.game.levels.catalog import LEVEL_ADVANCED, LEVEL_BASIC, PASS_THRESHOLD_PERCENT


def can_select_advanced(has_passed_basic_level: bool) -> bool:
    return has_passed_basic_level


def is_level_allowed(*, level: str, has_passed_basic_level: bool) -> bool:
    if level == LEVEL_BASIC:
        return True
    if level == LEVEL_ADVANCED:
        return can_select_advanced(has_passed_basic_level)
    return False


def score_percentage(score: int, total: int) -> int:
    if total <= 0:
        return 0
    ratio = Decimal(100 * score) / Decimal(total)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_passing_score(percentage: int) -> bool:
    return percentage >= PASS_THRESHOLD_PERCENT


def unlocks_advanced(*, level: str, score: int, total: int) -> bool:
    """Only a finished basic run can unlock the advanced set."""
    return level == LEVEL_BASIC and is_passing_score(score_percentage(score, total))
