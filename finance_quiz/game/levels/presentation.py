from __future__ import annotations

LEVEL_LABELS: dict[str, str] = {
    "basic": "Basic",
    "advanced": "Advanced",
}

LEVEL_SET_TITLES: dict[str, str] = {
    "basic": "Set 1",
    "advanced": "Set 2",
}

LEVEL_SET_SUBTITLES: dict[str, str] = {
    "basic": "Basic Finance",
    "advanced": "Advanced Finance",
}


def display_level_label(level: str) -> str:
    label = LEVEL_LABELS.get(level)
    if label is not None:
        return label
    return level.replace("_", " ").title()


def display_quiz_title(level: str) -> str:
    return f"{display_level_label(level)} Finance Quiz"
