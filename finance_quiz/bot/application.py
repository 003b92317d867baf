from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties

from finance_quiz.bot.handlers.gameplay import router as gameplay_router
from finance_quiz.bot.handlers.start import router as start_router
from finance_quiz.core.config import get_settings

_bot: Bot | None = None
_dispatcher: Dispatcher | None = None


def build_bot() -> Bot:
    global _bot
    if _bot is not None:
        return _bot

    settings = get_settings()
    _bot = Bot(token=settings.telegram_bot_token, default=DefaultBotProperties())
    return _bot


def build_dispatcher() -> Dispatcher:
    global _dispatcher
    if _dispatcher is not None:
        return _dispatcher

    dispatcher = Dispatcher()
    dispatcher.include_router(start_router)
    dispatcher.include_router(gameplay_router)
    _dispatcher = dispatcher
    return dispatcher


async def close_bot() -> None:
    global _bot
    if _bot is None:
        return

    await _bot.session.close()
    _bot = None
