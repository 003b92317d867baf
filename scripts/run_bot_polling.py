import asyncio

from finance_quiz.bot.application import build_bot, build_dispatcher
from finance_quiz.core.config import get_settings
from finance_quiz.core.logging import configure_logging


async def main() -> None:
    configure_logging(get_settings().log_level)
    bot = build_bot()
    dp = build_dispatcher()
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
