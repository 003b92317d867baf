from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any


@dataclass(slots=True)
class DummyAnswerCall:
    text: str | None
    kwargs: dict[str, Any]


class DummyBot:
    def __init__(self, *, username: str = "finance_quiz_bot") -> None:
        self.username = username
        self.sent_messages: list[dict[str, Any]] = []

    async def get_me(self) -> SimpleNamespace:
        return SimpleNamespace(username=self.username)

    async def send_message(self, **kwargs: Any) -> None:
        self.sent_messages.append(kwargs)


class DummyMessage:
    def __init__(
        self,
        *,
        bot: DummyBot | None = None,
        from_user: SimpleNamespace | None = None,
    ) -> None:
        self.bot = bot or DummyBot()
        self.from_user = from_user
        self.answers: list[DummyAnswerCall] = []
        self.edits: list[DummyAnswerCall] = []

    async def answer(self, text: str | None = None, **kwargs: Any) -> None:
        self.answers.append(DummyAnswerCall(text=text, kwargs=kwargs))

    async def edit_text(self, text: str, **kwargs: Any) -> None:
        self.edits.append(DummyAnswerCall(text=text, kwargs=kwargs))


class DummyCallback:
    def __init__(
        self,
        *,
        data: str | None,
        from_user: SimpleNamespace | None,
        message: DummyMessage | None = None,
        callback_id: str = "cb-1",
    ) -> None:
        self.data = data
        self.from_user = from_user
        self.message = message or DummyMessage()
        self.bot = self.message.bot
        self.id = callback_id
        self.answer_calls: list[dict[str, Any]] = []

    async def answer(self, text: str | None = None, show_alert: bool = False) -> None:
        self.answer_calls.append({"text": text, "show_alert": show_alert})


def callback_data_of(markup: Any) -> list[str]:
    return [button.callback_data for row in markup.inline_keyboard for button in row]
