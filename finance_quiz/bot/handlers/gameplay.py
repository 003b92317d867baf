from __future__ import annotations

import re
from typing import Callable

import structlog
from aiogram import F, Router
from aiogram.types import CallbackQuery, Message

from finance_quiz.bot.handlers.gameplay_views import build_home_text, build_question_text, build_result_text
from finance_quiz.bot.keyboards.home import build_home_keyboard
from finance_quiz.bot.keyboards.quiz import build_quiz_keyboard
from finance_quiz.bot.keyboards.result import build_result_keyboard
from finance_quiz.bot.sessions import get_session_registry
from finance_quiz.bot.texts.en import TEXTS_EN
from finance_quiz.game.levels.catalog import LEVEL_ORDER
from finance_quiz.game.sessions.errors import LevelLockedError
from finance_quiz.game.sessions.service import QuizSession
from finance_quiz.game.sessions.types import QuizRunView

router = Router(name="gameplay")
logger = structlog.get_logger("finance_quiz.bot.handlers.gameplay")

ANSWER_RE = re.compile(r"^answer:([0-3])$")
LEVEL_RE = re.compile(r"^level:(basic|advanced)$")


async def _show_home(message: Message, *, session: QuizSession, edit: bool) -> None:
    text = build_home_text(
        selected_level=session.selected_level,
        has_passed_basic_level=session.has_passed_basic_level,
    )
    keyboard = build_home_keyboard(
        selected_level=session.selected_level,
        has_passed_basic_level=session.has_passed_basic_level,
    )
    if edit:
        await message.edit_text(text, reply_markup=keyboard, parse_mode="HTML")
    else:
        await message.answer(text, reply_markup=keyboard, parse_mode="HTML")


async def _show_run(message: Message, *, view: QuizRunView, edit: bool) -> None:
    if view.is_finished:
        text = build_result_text(view)
        keyboard = build_result_keyboard(view=view)
    else:
        text = build_question_text(view)
        keyboard = build_quiz_keyboard(view=view)

    if edit:
        await message.edit_text(text, reply_markup=keyboard, parse_mode="HTML")
    else:
        await message.answer(text, reply_markup=keyboard, parse_mode="HTML")


async def _apply_transition(
    callback: CallbackQuery,
    *,
    transition: Callable[[QuizSession], bool],
    name: str,
) -> None:
    if callback.from_user is None or callback.message is None:
        await callback.answer(TEXTS_EN["msg.system.error"], show_alert=True)
        return

    session = get_session_registry().get(callback.from_user.id)
    if session is None or session.run is None:
        await callback.message.answer(
            TEXTS_EN["msg.game.session.not_found"],
            reply_markup=build_home_keyboard(),
        )
        await callback.answer()
        return

    before = session.view()
    try:
        changed = transition(session)
    except LevelLockedError:
        await callback.answer(TEXTS_EN["msg.locked.level"], show_alert=True)
        return

    after = session.view()
    if not changed or after is None or after == before:
        logger.debug("quiz_callback_without_change", transition=name, user_id=callback.from_user.id)
        await callback.answer()
        return

    await _show_run(callback.message, view=after, edit=True)
    await callback.answer()


@router.callback_query(F.data.regexp(LEVEL_RE))
async def handle_level_select(callback: CallbackQuery) -> None:
    if callback.data is None or callback.from_user is None or callback.message is None:
        await callback.answer(TEXTS_EN["msg.system.error"], show_alert=True)
        return

    matched = LEVEL_RE.match(callback.data)
    if matched is None or matched.group(1) not in LEVEL_ORDER:
        await callback.answer(TEXTS_EN["msg.system.error"], show_alert=True)
        return

    level = matched.group(1)
    session = get_session_registry().get_or_create(callback.from_user.id)
    if session.selected_level == level:
        await callback.answer()
        return

    try:
        session.select_level(level)
    except LevelLockedError:
        await callback.answer(TEXTS_EN["msg.locked.level"], show_alert=True)
        return

    await _show_home(callback.message, session=session, edit=True)
    await callback.answer()


@router.callback_query(F.data == "quiz:start")
async def handle_quiz_start(callback: CallbackQuery) -> None:
    if callback.from_user is None or callback.message is None:
        await callback.answer(TEXTS_EN["msg.system.error"], show_alert=True)
        return

    session = get_session_registry().get_or_create(callback.from_user.id)
    try:
        run = session.start_run()
    except LevelLockedError as exc:
        logger.info("quiz_start_rejected", user_id=callback.from_user.id, level=exc.level)
        await callback.answer(TEXTS_EN["msg.locked.level"], show_alert=True)
        return

    await _show_run(callback.message, view=run.view(), edit=False)
    await callback.answer()


@router.callback_query(F.data.regexp(ANSWER_RE))
async def handle_answer(callback: CallbackQuery) -> None:
    if callback.data is None or callback.from_user is None or callback.message is None:
        await callback.answer(TEXTS_EN["msg.system.error"], show_alert=True)
        return

    matched = ANSWER_RE.match(callback.data)
    if matched is None:
        await callback.answer(TEXTS_EN["msg.system.error"], show_alert=True)
        return

    option_index = int(matched.group(1))

    def _select(session: QuizSession) -> bool:
        run = session.require_run()
        options = run.current_question.options
        return session.select_answer(options[option_index])

    await _apply_transition(callback, transition=_select, name="select_answer")


@router.callback_query(F.data == "quiz:submit")
async def handle_submit(callback: CallbackQuery) -> None:
    await _apply_transition(callback, transition=QuizSession.submit_answer, name="submit_answer")


@router.callback_query(F.data == "quiz:next")
async def handle_next(callback: CallbackQuery) -> None:
    await _apply_transition(callback, transition=QuizSession.advance, name="advance")


@router.callback_query(F.data == "quiz:restart")
async def handle_restart(callback: CallbackQuery) -> None:
    await _apply_transition(callback, transition=QuizSession.restart_same_level, name="restart_same_level")


@router.callback_query(F.data == "quiz:switch")
async def handle_switch_level(callback: CallbackQuery) -> None:
    await _apply_transition(callback, transition=QuizSession.switch_level, name="switch_level")


@router.callback_query(F.data == "game:stop")
async def handle_game_stop(callback: CallbackQuery) -> None:
    if callback.from_user is None or callback.message is None:
        await callback.answer(TEXTS_EN["msg.system.error"], show_alert=True)
        return

    registry = get_session_registry()
    session = registry.get_or_create(callback.from_user.id)
    session.leave_quiz()
    registry.release(callback.from_user.id)
    await callback.message.answer(TEXTS_EN["msg.game.stopped"])
    await _show_home(callback.message, session=session, edit=False)
    await callback.answer()
