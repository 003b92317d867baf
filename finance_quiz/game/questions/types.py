from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    question_id: str
    text: str
    options: tuple[str, str, str, str]
    correct_option: str
    level: str
