from __future__ import annotations

import random

import structlog

from finance_quiz.game.levels.catalog import LEVEL_BASIC, LEVEL_ORDER, other_level
from finance_quiz.game.levels.rules import is_level_allowed
from finance_quiz.game.sessions.errors import LevelLockedError, NoActiveRunError
from finance_quiz.game.sessions.run import QuizRun
from finance_quiz.game.sessions.types import STATE_FINISHED, QuizRunView, SessionProgress

logger = structlog.get_logger("finance_quiz.game.sessions.service")


class QuizSession:
    """State owned by the shell for one user.

    Holds the level chosen on the welcome screen, the pass flag and at most one
    active run. Every change to a run goes through the transition methods here.
    """

    def __init__(
        self,
        *,
        progress: SessionProgress | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._progress = progress if progress is not None else SessionProgress()
        self._rng = rng if rng is not None else random.Random()
        self._selected_level: str = LEVEL_BASIC
        self._run: QuizRun | None = None

    @property
    def has_passed_basic_level(self) -> bool:
        return self._progress.has_passed_basic_level

    @property
    def selected_level(self) -> str:
        return self._selected_level

    @property
    def run(self) -> QuizRun | None:
        return self._run

    def require_run(self) -> QuizRun:
        if self._run is None:
            raise NoActiveRunError("no quiz run is active")
        return self._run

    def select_level(self, level: str) -> None:
        if level not in LEVEL_ORDER:
            raise ValueError(f"unknown quiz level: {level!r}")
        self._ensure_allowed(level)
        self._selected_level = level

    def start_run(self, level: str | None = None) -> QuizRun:
        target_level = self._selected_level if level is None else level
        if target_level not in LEVEL_ORDER:
            raise ValueError(f"unknown quiz level: {target_level!r}")
        self._ensure_allowed(target_level)

        self._selected_level = target_level
        self._run = QuizRun(level=target_level, progress=self._progress, rng=self._rng)
        return self._run

    def select_answer(self, option: str) -> bool:
        if self._run is None:
            return False
        return self._run.select_answer(option)

    def submit_answer(self) -> bool:
        if self._run is None:
            return False
        return self._run.submit_answer()

    def advance(self) -> bool:
        if self._run is None:
            return False
        return self._run.advance()

    def restart_same_level(self) -> bool:
        if self._run is None:
            return False
        return self._run.restart_same_level()

    def switch_level(self) -> bool:
        if self._run is None or self._run.state != STATE_FINISHED:
            return False
        self._ensure_allowed(other_level(self._run.level))
        changed = self._run.switch_level()
        self._selected_level = self._run.level
        return changed

    def leave_quiz(self) -> None:
        self._run = None
        self._selected_level = LEVEL_BASIC

    def view(self) -> QuizRunView | None:
        if self._run is None:
            return None
        return self._run.view()

    def _ensure_allowed(self, level: str) -> None:
        if is_level_allowed(level=level, has_passed_basic_level=self._progress.has_passed_basic_level):
            return
        logger.info("level_locked_rejected", level=level)
        raise LevelLockedError(level)


class SessionRegistry:
    """In-memory sessions keyed by user id, one per bot process."""

    def __init__(self, *, shuffle_seed: int | None = None) -> None:
        self._shuffle_seed = shuffle_seed
        self._sessions: dict[int, QuizSession] = {}

    def get(self, user_id: int) -> QuizSession | None:
        return self._sessions.get(user_id)

    def get_or_create(self, user_id: int) -> QuizSession:
        session = self._sessions.get(user_id)
        if session is None:
            rng = random.Random(self._shuffle_seed) if self._shuffle_seed is not None else None
            session = QuizSession(rng=rng)
            self._sessions[user_id] = session
        return session

    def drop(self, user_id: int) -> None:
        self._sessions.pop(user_id, None)

    def release(self, user_id: int) -> bool:
        """Drop an idle session that has nothing worth keeping."""
        session = self._sessions.get(user_id)
        if session is None or session.run is not None or session.has_passed_basic_level:
            return False
        self.drop(user_id)
        return True

    def __len__(self) -> int:
        return len(self._sessions)
