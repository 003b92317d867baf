from __future__ import annotations

from finance_quiz.core.config import get_settings
from finance_quiz.game.sessions.service import SessionRegistry

_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry:
    global _registry
    if _registry is not None:
        return _registry

    _registry = SessionRegistry(shuffle_seed=get_settings().quiz_shuffle_seed)
    return _registry
