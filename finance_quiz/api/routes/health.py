from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from finance_quiz.game.levels.catalog import LEVEL_ORDER
from finance_quiz.game.questions.static_bank import question_count

router = APIRouter(tags=["health"])


@router.get("/live")
async def live() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": "live"})


@router.get("/health")
async def health() -> JSONResponse:
    question_sets = {level: question_count(level) for level in LEVEL_ORDER}
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "ok",
            "checks": {
                "question_bank": {"status": "ok", "question_sets": question_sets},
            },
        },
    )
