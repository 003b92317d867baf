from __future__ import annotations

from finance_quiz.game.questions.types import QuizQuestion
from finance_quiz.game.sessions.run import QuizRun


def wrong_option(question: QuizQuestion) -> str:
    return next(option for option in question.options if option != question.correct_option)


def answer_current(run: QuizRun, *, correct: bool) -> None:
    question = run.current_question
    run.select_answer(question.correct_option if correct else wrong_option(question))
    run.submit_answer()


def play_to_finish(run: QuizRun, *, correct_answers: int) -> None:
    answered = 0
    while not run.view().is_finished:
        answer_current(run, correct=answered < correct_answers)
        answered += 1
        run.advance()
