from __future__ import annotations

import structlog
from aiogram.types import Update
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from finance_quiz.bot.application import build_bot, build_dispatcher
from finance_quiz.core.config import get_settings
from finance_quiz.services.telegram_updates import (
    extract_routed_kind,
    extract_sender_id,
    extract_update_id,
    is_valid_webhook_secret,
)

router = APIRouter(tags=["telegram"])
logger = structlog.get_logger(__name__)


def _ignored() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"status": "ignored"},
    )


async def _process_update(*, update_payload: dict[str, object], update_id: int) -> bool:
    bot = build_bot()
    dispatcher = build_dispatcher()
    try:
        update = Update.model_validate(update_payload, context={"bot": bot})
        await dispatcher.feed_update(bot, update)
        return True
    except Exception as exc:
        logger.warning(
            "telegram_webhook_update_failed",
            update_id=update_id,
            error_type=type(exc).__name__,
        )
        return False


@router.post("/webhook/telegram")
async def telegram_webhook(request: Request) -> JSONResponse:
    settings = get_settings()
    received_secret = request.headers.get("X-Telegram-Bot-Api-Secret-Token")
    if not is_valid_webhook_secret(
        expected_secret=settings.telegram_webhook_secret,
        received_secret=received_secret,
    ):
        logger.warning("telegram_webhook_invalid_secret")
        return _ignored()

    try:
        update_payload = await request.json()
    except Exception:
        logger.warning("telegram_webhook_invalid_json")
        return _ignored()

    update_id = extract_update_id(update_payload)
    if update_id is None:
        logger.warning("telegram_webhook_missing_update_id")
        return _ignored()

    update_kind = extract_routed_kind(update_payload)
    if update_kind is None:
        logger.info("telegram_webhook_unrouted_update", update_id=update_id)
        return _ignored()

    logger.debug(
        "telegram_webhook_update_received",
        update_id=update_id,
        update_kind=update_kind,
        user_id=extract_sender_id(update_payload),
    )

    processed = await _process_update(update_payload=update_payload, update_id=update_id)
    if not processed:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"status": "failed"},
        )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"status": "processed"},
    )
