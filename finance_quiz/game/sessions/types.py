from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

RunState = Literal["IN_PROGRESS", "ANSWER_REVEALED", "FINISHED"]
OptionState = Literal["neutral", "selected", "correct", "incorrect"]

STATE_IN_PROGRESS: RunState = "IN_PROGRESS"
STATE_ANSWER_REVEALED: RunState = "ANSWER_REVEALED"
STATE_FINISHED: RunState = "FINISHED"


@dataclass(slots=True)
class SessionProgress:
    has_passed_basic_level: bool = False

    def mark_basic_passed(self) -> bool:
        if self.has_passed_basic_level:
            return False
        self.has_passed_basic_level = True
        return True


@dataclass(frozen=True, slots=True)
class OptionView:
    index: int
    text: str
    state: OptionState


@dataclass(frozen=True, slots=True)
class QuizRunView:
    level: str
    state: RunState
    question_id: str
    question_text: str
    question_number: int
    total_questions: int
    options: tuple[OptionView, ...]
    selected_answer: str | None
    correct_answer: str | None
    score: int
    percentage: int
    progress: float
    passed: bool
    unlocked_advanced: bool

    @property
    def is_finished(self) -> bool:
        return self.state == STATE_FINISHED

    @property
    def is_answer_revealed(self) -> bool:
        return self.state == STATE_ANSWER_REVEALED

    @property
    def can_submit(self) -> bool:
        return self.state == STATE_IN_PROGRESS and self.selected_answer is not None
