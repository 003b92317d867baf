from __future__ import annotations

import random
from collections import Counter

import pytest

from finance_quiz.game.questions.static_bank import get_questions
from finance_quiz.game.sessions.run import QuizRun
from finance_quiz.game.sessions.types import SessionProgress
from tests.game.quiz_run_fixtures import answer_current, play_to_finish, wrong_option


def _new_run(level: str = "basic", *, seed: int = 7, progress: SessionProgress | None = None) -> QuizRun:
    return QuizRun(level=level, progress=progress or SessionProgress(), rng=random.Random(seed))


def _ids(questions) -> Counter[str]:
    return Counter(question.question_id for question in questions)


def test_new_run_starts_in_progress_at_first_question() -> None:
    run = _new_run()

    assert run.state == "IN_PROGRESS"
    assert run.current_index == 0
    assert run.score == 0
    assert run.selected_answer is None
    assert run.total_questions == 17


def test_questions_are_a_permutation_of_the_level_set() -> None:
    run = _new_run("advanced")
    assert _ids(run.questions) == _ids(get_questions("advanced"))


def test_shuffle_is_driven_by_injected_random_source() -> None:
    first = _new_run(seed=42)
    second = _new_run(seed=42)
    other = _new_run(seed=43)

    assert [q.question_id for q in first.questions] == [q.question_id for q in second.questions]
    assert [q.question_id for q in first.questions] != [q.question_id for q in other.questions]


def test_select_answer_overwrites_selection() -> None:
    run = _new_run()
    options = run.current_question.options

    assert run.select_answer(options[0]) is True
    assert run.select_answer(options[2]) is True
    assert run.selected_answer == options[2]


def test_submit_without_selection_is_noop() -> None:
    run = _new_run()

    assert run.submit_answer() is False
    assert run.state == "IN_PROGRESS"
    assert run.score == 0


def test_submit_correct_answer_scores_exactly_one_point() -> None:
    run = _new_run()
    run.select_answer(run.current_question.correct_option)

    assert run.submit_answer() is True
    assert run.state == "ANSWER_REVEALED"
    assert run.score == 1


def test_submit_twice_does_not_double_count() -> None:
    run = _new_run()
    run.select_answer(run.current_question.correct_option)
    run.submit_answer()

    assert run.submit_answer() is False
    assert run.score == 1


def test_submit_wrong_answer_reveals_without_scoring() -> None:
    run = _new_run()
    run.select_answer(wrong_option(run.current_question))
    run.submit_answer()

    assert run.state == "ANSWER_REVEALED"
    assert run.score == 0


def test_select_answer_after_reveal_is_noop() -> None:
    run = _new_run()
    answer_current(run, correct=True)
    correct = run.current_question.correct_option

    assert run.select_answer(wrong_option(run.current_question)) is False
    assert run.selected_answer == correct


def test_advance_requires_revealed_answer() -> None:
    run = _new_run()

    assert run.advance() is False
    assert run.current_index == 0


def test_advance_moves_to_next_question_and_clears_selection() -> None:
    run = _new_run()
    answer_current(run, correct=True)

    assert run.advance() is True
    assert run.current_index == 1
    assert run.selected_answer is None
    assert run.state == "IN_PROGRESS"


def test_advance_on_last_question_finishes_without_overflowing_index() -> None:
    run = _new_run("advanced")
    play_to_finish(run, correct_answers=0)

    assert run.state == "FINISHED"
    assert run.current_index == run.total_questions - 1
    assert run.advance() is False
    assert run.current_index == run.total_questions - 1


def test_score_stays_within_bounds_through_a_full_run() -> None:
    run = _new_run()
    while run.state != "FINISHED":
        answer_current(run, correct=True)
        run.submit_answer()
        assert 0 <= run.score <= run.total_questions
        run.advance()

    assert run.score == run.total_questions
    assert run.percentage == 100


def test_basic_pass_sets_flag() -> None:
    progress = SessionProgress()
    run = _new_run(progress=progress)
    play_to_finish(run, correct_answers=12)

    assert run.score == 12
    assert run.percentage == 71
    assert progress.has_passed_basic_level is True
    assert run.view().passed is True


def test_basic_fail_keeps_flag_false() -> None:
    progress = SessionProgress()
    run = _new_run(progress=progress)
    play_to_finish(run, correct_answers=11)

    assert run.percentage == 65
    assert progress.has_passed_basic_level is False
    assert run.view().passed is False


def test_flag_survives_restart_and_switch_regardless_of_later_scores() -> None:
    progress = SessionProgress()
    run = _new_run(progress=progress)
    play_to_finish(run, correct_answers=17)

    run.restart_same_level()
    play_to_finish(run, correct_answers=0)
    assert progress.has_passed_basic_level is True

    run.switch_level()
    play_to_finish(run, correct_answers=0)
    run.switch_level()
    assert progress.has_passed_basic_level is True


def test_advanced_completion_does_not_touch_flag() -> None:
    progress = SessionProgress()
    run = _new_run("advanced", progress=progress)
    play_to_finish(run, correct_answers=21)

    assert run.percentage == 100
    assert progress.has_passed_basic_level is False
    assert run.view().passed is False


def test_restart_same_level_resets_state_and_reshuffles() -> None:
    run = _new_run()
    answer_current(run, correct=True)
    run.advance()

    assert run.restart_same_level() is True
    assert run.level == "basic"
    assert run.current_index == 0
    assert run.score == 0
    assert run.selected_answer is None
    assert run.state == "IN_PROGRESS"
    assert _ids(run.questions) == _ids(get_questions("basic"))


def test_switch_level_toggles_and_resets() -> None:
    run = _new_run()
    play_to_finish(run, correct_answers=5)

    assert run.switch_level() is True
    assert run.level == "advanced"
    assert run.score == 0
    assert run.state == "IN_PROGRESS"
    assert _ids(run.questions) == _ids(get_questions("advanced"))

    run.switch_level()
    assert run.level == "basic"


@pytest.mark.parametrize("revealed", [False, True])
def test_switch_level_before_finish_is_noop(revealed: bool) -> None:
    run = _new_run(progress=SessionProgress(has_passed_basic_level=True))
    answer_current(run, correct=True)
    run.advance()
    answer_current(run, correct=True)
    if not revealed:
        run.advance()
    state_before = run.state
    questions_before = run.questions

    assert run.switch_level() is False
    assert run.level == "basic"
    assert run.state == state_before
    assert run.score == 2
    assert run.questions == questions_before


def test_view_reports_pass_only_once_finished() -> None:
    progress = SessionProgress()
    run = _new_run(progress=progress)
    answer_current(run, correct=True)

    assert run.percentage == 6
    assert run.view().passed is False

    play_to_finish(run, correct_answers=17)
    view = run.view()
    assert view.passed is True
    assert view.unlocked_advanced is True


def test_view_unlocked_advanced_mirrors_session_flag() -> None:
    assert _new_run().view().unlocked_advanced is False
    assert _new_run(progress=SessionProgress(has_passed_basic_level=True)).view().unlocked_advanced is True


def test_view_option_states_before_and_after_reveal() -> None:
    run = _new_run()
    question = run.current_question
    wrong = wrong_option(question)

    assert {option.state for option in run.view().options} == {"neutral"}

    run.select_answer(wrong)
    states = {option.text: option.state for option in run.view().options}
    assert states[wrong] == "selected"
    assert list(states.values()).count("selected") == 1
    assert run.view().correct_answer is None
    assert run.view().can_submit is True

    run.submit_answer()
    view = run.view()
    states = {option.text: option.state for option in view.options}
    assert states[wrong] == "incorrect"
    assert states[question.correct_option] == "correct"
    assert list(states.values()).count("neutral") == 2
    assert view.correct_answer == question.correct_option
    assert view.is_answer_revealed is True


def test_view_reports_progress() -> None:
    run = _new_run()
    view = run.view()

    assert view.question_number == 1
    assert view.total_questions == 17
    assert view.progress == 1 / 17
    assert view.question_id == run.current_question.question_id
