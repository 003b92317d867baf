from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from finance_quiz.api.routes.health import router as health_router
from finance_quiz.api.routes.telegram_webhook import router as telegram_webhook_router
from finance_quiz.bot.application import close_bot
from finance_quiz.core.config import get_settings
from finance_quiz.core.logging import configure_logging
from finance_quiz.game.levels.catalog import LEVEL_ORDER
from finance_quiz.game.questions.static_bank import question_count

logger = structlog.get_logger("finance_quiz.main")


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "finance_quiz_api_started",
        question_sets={level: question_count(level) for level in LEVEL_ORDER},
    )
    yield
    await close_bot()
    logger.info("finance_quiz_api_stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Finance Quiz Bot API",
        version="0.1.0",
        docs_url="/docs" if settings.app_env == "dev" else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.include_router(health_router)
    app.include_router(telegram_webhook_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "finance_quiz.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    run()
