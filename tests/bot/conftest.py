from __future__ import annotations

import pytest

from finance_quiz.bot import sessions
from finance_quiz.game.sessions.service import SessionRegistry


@pytest.fixture(autouse=True)
def session_registry(monkeypatch) -> SessionRegistry:
    registry = SessionRegistry(shuffle_seed=5)
    monkeypatch.setattr(sessions, "_registry", registry)
    return registry
