from finance_quiz.game.levels.catalog import LEVEL_ADVANCED, LEVEL_BASIC, PASS_THRESHOLD_PERCENT
from finance_quiz.game.levels.rules import can_select_advanced, is_level_allowed, score_percentage

__all__ = [
    "LEVEL_ADVANCED",
    "LEVEL_BASIC",
    "PASS_THRESHOLD_PERCENT",
    "can_select_advanced",
    "is_level_allowed",
    "score_percentage",
]
