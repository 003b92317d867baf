from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from finance_quiz.game.levels.catalog import LEVEL_ADVANCED, LEVEL_BASIC
from finance_quiz.game.sessions.types import QuizRunView


def build_result_keyboard(*, view: QuizRunView) -> InlineKeyboardMarkup:
    rows = [[InlineKeyboardButton(text="🔁 Restart Same Level", callback_data="quiz:restart")]]
    if view.level == LEVEL_BASIC and view.passed:
        rows.append([InlineKeyboardButton(text="🚀 Try Advanced Level", callback_data="quiz:switch")])
    elif view.level == LEVEL_ADVANCED:
        rows.append([InlineKeyboardButton(text="Try Basic Level", callback_data="quiz:switch")])
    rows.append([InlineKeyboardButton(text="Back to menu", callback_data="game:stop")])
    return InlineKeyboardMarkup(inline_keyboard=rows)
