from __future__ import annotations

from types import SimpleNamespace

import pytest

from finance_quiz.bot.handlers import start
from finance_quiz.bot.texts.en import TEXTS_EN
from finance_quiz.game.sessions.service import SessionRegistry
from tests.bot.helpers import DummyMessage, callback_data_of


@pytest.mark.asyncio
async def test_start_command_shows_welcome_screen(session_registry: SessionRegistry) -> None:
    message = DummyMessage(from_user=SimpleNamespace(id=7))

    await start.handle_start(message)  # type: ignore[arg-type]

    assert session_registry.get(7) is not None
    sent = message.answers[0]
    assert "Financial Literacy Quiz" in (sent.text or "")
    assert callback_data_of(sent.kwargs["reply_markup"]) == ["level:basic", "level:advanced", "quiz:start"]


@pytest.mark.asyncio
async def test_start_command_leaves_running_quiz_but_keeps_progress(session_registry: SessionRegistry) -> None:
    session = session_registry.get_or_create(7)
    session.start_run()
    message = DummyMessage(from_user=SimpleNamespace(id=7))

    await start.handle_start(message)  # type: ignore[arg-type]

    assert session.run is None
    assert session.selected_level == "basic"


@pytest.mark.asyncio
async def test_start_command_without_user_returns_error() -> None:
    message = DummyMessage(from_user=None)

    await start.handle_start(message)  # type: ignore[arg-type]

    assert message.answers[0].text == TEXTS_EN["msg.system.error"]
