from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from finance_quiz.game.sessions.types import OptionView, QuizRunView

OPTION_STATE_MARKERS: dict[str, str] = {
    "neutral": "",
    "selected": "🔵 ",
    "correct": "✅ ",
    "incorrect": "❌ ",
}


def _option_button(option: OptionView) -> InlineKeyboardButton:
    return InlineKeyboardButton(
        text=f"{OPTION_STATE_MARKERS[option.state]}{option.text}",
        callback_data=f"answer:{option.index}",
    )


def build_quiz_keyboard(*, view: QuizRunView) -> InlineKeyboardMarkup:
    rows = [[_option_button(option)] for option in view.options]
    if view.is_answer_revealed:
        rows.append([InlineKeyboardButton(text="Next Question →", callback_data="quiz:next")])
    elif view.can_submit:
        rows.append([InlineKeyboardButton(text="Submit Answer", callback_data="quiz:submit")])
    rows.append([InlineKeyboardButton(text="Stop and menu", callback_data="game:stop")])
    return InlineKeyboardMarkup(inline_keyboard=rows)
