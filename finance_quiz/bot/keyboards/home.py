from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from finance_quiz.game.levels.catalog import LEVEL_ADVANCED, LEVEL_BASIC
from finance_quiz.game.levels.presentation import LEVEL_SET_SUBTITLES, LEVEL_SET_TITLES


def _level_button_text(level: str, *, is_selected: bool, is_locked: bool) -> str:
    text = f"{LEVEL_SET_TITLES[level]} · {LEVEL_SET_SUBTITLES[level]}"
    if is_locked:
        return f"🔒 {text}"
    if is_selected:
        return f"✅ {text}"
    return text


def build_home_keyboard(
    *, selected_level: str = LEVEL_BASIC, has_passed_basic_level: bool = False
) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text=_level_button_text(
                        LEVEL_BASIC,
                        is_selected=selected_level == LEVEL_BASIC,
                        is_locked=False,
                    ),
                    callback_data=f"level:{LEVEL_BASIC}",
                ),
                InlineKeyboardButton(
                    text=_level_button_text(
                        LEVEL_ADVANCED,
                        is_selected=selected_level == LEVEL_ADVANCED,
                        is_locked=not has_passed_basic_level,
                    ),
                    callback_data=f"level:{LEVEL_ADVANCED}",
                ),
            ],
            [InlineKeyboardButton(text="▶️ Start Quiz", callback_data="quiz:start")],
        ]
    )
