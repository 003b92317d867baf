from __future__ import annotations

from aiogram import Router
from aiogram.filters import CommandStart
from aiogram.types import Message

from finance_quiz.bot.handlers.gameplay_views import build_home_text
from finance_quiz.bot.keyboards.home import build_home_keyboard
from finance_quiz.bot.sessions import get_session_registry
from finance_quiz.bot.texts.en import TEXTS_EN

router = Router(name="start")


@router.message(CommandStart())
async def handle_start(message: Message) -> None:
    if message.from_user is None:
        await message.answer(TEXTS_EN["msg.system.error"])
        return

    session = get_session_registry().get_or_create(message.from_user.id)
    session.leave_quiz()
    await message.answer(
        build_home_text(
            selected_level=session.selected_level,
            has_passed_basic_level=session.has_passed_basic_level,
        ),
        reply_markup=build_home_keyboard(
            selected_level=session.selected_level,
            has_passed_basic_level=session.has_passed_basic_level,
        ),
        parse_mode="HTML",
    )
