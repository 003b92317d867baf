class QuizSessionError(Exception):
    pass


class LevelLockedError(QuizSessionError):
    def __init__(self, level: str) -> None:
        super().__init__(f"level {level!r} is locked until the basic level is passed")
        self.level = level


class NoActiveRunError(QuizSessionError):
    pass
