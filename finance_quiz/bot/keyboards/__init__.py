from finance_quiz.bot.keyboards.home import build_home_keyboard
from finance_quiz.bot.keyboards.quiz import build_quiz_keyboard
from finance_quiz.bot.keyboards.result import build_result_keyboard

__all__ = [
    "build_home_keyboard",
    "build_quiz_keyboard",
    "build_result_keyboard",
]
