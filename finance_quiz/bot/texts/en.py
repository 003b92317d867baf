TEXTS_EN: dict[str, str] = {
    "msg.home.title": "Financial Literacy Quiz",
    "msg.home.select_set": "Select Question Set",
    "msg.home.set_line": "{title}: {subtitle} ({count} questions)",
    "msg.home.selected": "Selected: {title} ({subtitle})",
    "msg.home.locked_hint": "Complete Basic Level with 70% or higher to unlock Advanced",
    "msg.home.hint": "Press Start Quiz when you are ready.",
    "msg.locked.level": "Complete Basic Level with 70% or higher to unlock Advanced",
    "msg.game.question.counter": "Question {current} of {total}",
    "msg.game.choose_option": "Choose an answer and press Submit Answer.",
    "msg.game.answer.correct": "Correct!",
    "msg.game.answer.incorrect": "Wrong! The correct answer was: {answer}",
    "msg.game.stopped": "Quiz stopped. Back to the menu.",
    "msg.game.session.not_found": "No quiz is running. Start a new one from the menu.",
    "msg.result.title": "Quiz Complete!",
    "msg.result.score": "Your score: {score} out of {total}",
    "msg.result.percentage": "Percentage: {percentage}%",
    "msg.result.level": "Quiz Level: {level}",
    "msg.result.unlocked": "\U0001f389 Congratulations! You've unlocked the Advanced Level!",
    "msg.result.need_more": "You need 70% to unlock the Advanced Level",
    "msg.system.error": "Something went wrong. Please try again.",
}
