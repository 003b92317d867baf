from __future__ import annotations

import random

import structlog

from finance_quiz.game.levels.catalog import other_level
from finance_quiz.game.levels.rules import can_select_advanced, score_percentage, unlocks_advanced
from finance_quiz.game.questions.static_bank import get_questions
from finance_quiz.game.questions.types import QuizQuestion
from finance_quiz.game.sessions.types import (
    STATE_ANSWER_REVEALED,
    STATE_FINISHED,
    STATE_IN_PROGRESS,
    OptionState,
    OptionView,
    QuizRunView,
    RunState,
    SessionProgress,
)

logger = structlog.get_logger("finance_quiz.game.sessions.run")


class QuizRun:
    """One playthrough of a shuffled question set.

    The five transitions are the only mutators. Each returns ``True`` when it
    changed the run and ``False`` when its precondition did not hold, in which
    case the run is left untouched.
    """

    def __init__(
        self,
        *,
        level: str,
        progress: SessionProgress,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._progress = progress
        self._reset(level)

    @property
    def level(self) -> str:
        return self._level

    @property
    def questions(self) -> tuple[QuizQuestion, ...]:
        return tuple(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def score(self) -> int:
        return self._score

    @property
    def selected_answer(self) -> str | None:
        return self._selected_answer

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    @property
    def current_question(self) -> QuizQuestion:
        return self._questions[self._current_index]

    @property
    def percentage(self) -> int:
        return score_percentage(self._score, len(self._questions))

    def select_answer(self, option: str) -> bool:
        if self._state != STATE_IN_PROGRESS:
            return self._ignored("select_answer")
        self._selected_answer = option
        return True

    def submit_answer(self) -> bool:
        if self._state != STATE_IN_PROGRESS or not self._selected_answer:
            return self._ignored("submit_answer")

        self._state = STATE_ANSWER_REVEALED
        if self._selected_answer == self.current_question.correct_option:
            self._score += 1
        return True

    def advance(self) -> bool:
        if self._state != STATE_ANSWER_REVEALED:
            return self._ignored("advance")

        if self._current_index + 1 < len(self._questions):
            self._current_index += 1
            self._selected_answer = None
            self._state = STATE_IN_PROGRESS
            return True

        self._state = STATE_FINISHED
        percentage = self.percentage
        logger.info(
            "quiz_run_finished",
            level=self._level,
            score=self._score,
            total_questions=len(self._questions),
            percentage=percentage,
        )
        if unlocks_advanced(level=self._level, score=self._score, total=len(self._questions)):
            if self._progress.mark_basic_passed():
                logger.info("basic_level_passed", score=self._score, percentage=percentage)
        return True

    def restart_same_level(self) -> bool:
        self._reset(self._level)
        return True

    def switch_level(self) -> bool:
        if self._state != STATE_FINISHED:
            return self._ignored("switch_level")
        self._reset(other_level(self._level))
        return True

    def view(self) -> QuizRunView:
        question = self.current_question
        revealed = self._state != STATE_IN_PROGRESS
        percentage = self.percentage
        return QuizRunView(
            level=self._level,
            state=self._state,
            question_id=question.question_id,
            question_text=question.text,
            question_number=self._current_index + 1,
            total_questions=len(self._questions),
            options=tuple(
                OptionView(index=index, text=option, state=self._option_state(option))
                for index, option in enumerate(question.options)
            ),
            selected_answer=self._selected_answer,
            correct_answer=question.correct_option if revealed else None,
            score=self._score,
            percentage=percentage,
            progress=(self._current_index + 1) / len(self._questions),
            passed=(
                self._state == STATE_FINISHED
                and unlocks_advanced(level=self._level, score=self._score, total=len(self._questions))
            ),
            unlocked_advanced=can_select_advanced(self._progress.has_passed_basic_level),
        )

    def _option_state(self, option: str) -> OptionState:
        if self._state == STATE_IN_PROGRESS:
            return "selected" if option == self._selected_answer else "neutral"
        if option == self.current_question.correct_option:
            return "correct"
        if option == self._selected_answer:
            return "incorrect"
        return "neutral"

    def _reset(self, level: str) -> None:
        questions = get_questions(level)
        self._rng.shuffle(questions)
        self._level = level
        self._questions = questions
        self._current_index = 0
        self._score = 0
        self._selected_answer: str | None = None
        self._state: RunState = STATE_IN_PROGRESS
        logger.info("quiz_run_started", level=level, total_questions=len(questions))

    def _ignored(self, transition: str) -> bool:
        logger.debug("quiz_transition_ignored", transition=transition, state=self._state, level=self._level)
        return False
