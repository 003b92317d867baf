from __future__ import annotations

import html

from finance_quiz.bot.texts.en import TEXTS_EN
from finance_quiz.game.levels.catalog import LEVEL_BASIC, LEVEL_ORDER
from finance_quiz.game.levels.presentation import (
    LEVEL_SET_SUBTITLES,
    LEVEL_SET_TITLES,
    display_level_label,
    display_quiz_title,
)
from finance_quiz.game.questions.static_bank import question_count
from finance_quiz.game.sessions.types import QuizRunView

PROGRESS_BAR_WIDTH = 10


def _build_progress_bar(progress: float) -> str:
    filled = min(PROGRESS_BAR_WIDTH, max(0, round(progress * PROGRESS_BAR_WIDTH)))
    return "▰" * filled + "▱" * (PROGRESS_BAR_WIDTH - filled)


def build_home_text(*, selected_level: str, has_passed_basic_level: bool) -> str:
    lines = [
        f"<b>{html.escape(TEXTS_EN['msg.home.title'])}</b>",
        "",
        html.escape(TEXTS_EN["msg.home.select_set"]),
    ]
    for level in LEVEL_ORDER:
        lines.append(
            html.escape(
                TEXTS_EN["msg.home.set_line"].format(
                    title=LEVEL_SET_TITLES[level],
                    subtitle=LEVEL_SET_SUBTITLES[level],
                    count=question_count(level),
                )
            )
        )
    lines.append("")
    lines.append(
        html.escape(
            TEXTS_EN["msg.home.selected"].format(
                title=LEVEL_SET_TITLES[selected_level],
                subtitle=LEVEL_SET_SUBTITLES[selected_level],
            )
        )
    )
    if not has_passed_basic_level:
        lines.append(html.escape(TEXTS_EN["msg.home.locked_hint"]))
    lines.append(html.escape(TEXTS_EN["msg.home.hint"]))
    return "\n".join(lines)


def build_question_text(view: QuizRunView) -> str:
    counter_line = TEXTS_EN["msg.game.question.counter"].format(
        current=view.question_number,
        total=view.total_questions,
    )
    lines = [
        f"<b>{html.escape(display_quiz_title(view.level))}</b>",
        html.escape(counter_line),
        _build_progress_bar(view.progress),
        "",
        f"<b>{html.escape(view.question_text)}</b>",
        "",
    ]
    if view.is_answer_revealed and view.correct_answer is not None:
        if view.selected_answer == view.correct_answer:
            lines.append(html.escape(TEXTS_EN["msg.game.answer.correct"]))
        else:
            lines.append(
                html.escape(TEXTS_EN["msg.game.answer.incorrect"].format(answer=view.correct_answer))
            )
    else:
        lines.append(html.escape(TEXTS_EN["msg.game.choose_option"]))
    return "\n".join(lines)


def build_result_text(view: QuizRunView) -> str:
    lines = [
        f"<b>{html.escape(TEXTS_EN['msg.result.title'])}</b>",
        "",
        html.escape(TEXTS_EN["msg.result.score"].format(score=view.score, total=view.total_questions)),
        html.escape(TEXTS_EN["msg.result.percentage"].format(percentage=view.percentage)),
        html.escape(TEXTS_EN["msg.result.level"].format(level=display_level_label(view.level))),
    ]
    if view.level == LEVEL_BASIC:
        lines.append("")
        result_key = "msg.result.unlocked" if view.passed else "msg.result.need_more"
        lines.append(html.escape(TEXTS_EN[result_key]))
    return "\n".join(lines)
