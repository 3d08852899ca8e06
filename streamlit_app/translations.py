# streamlit_app/translations.py
from typing import Callable, Dict

from app.utils.config import settings

# "Quiz" namespace, keyed by locale
QUIZ_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "quizViewAnswerHuman": "Human",
        "quizViewAnswerAi": "AI",
        "quizViewAnswerReal": "Real",
        "quizViewAnswerFake": "Fake",
        "quizViewQuestionHumanAi": "Was this article written by a human or an AI?",
        "quizViewQuestionRealFake": "Is this news real or fake?",
        "quizViewSubmitButton": "Submit",
        "quizPageTitle": "Human or AI?",
        "quizPageUserLabel": "Your user ID",
        "quizPageStart": "Start quiz",
        "quizPageCorrect": "Correct!",
        "quizPageIncorrect": "Not quite.",
        "quizPageNext": "Next article",
        "quizPageFinished": "You finished this round.",
        "quizPageNoArticles": "There are no new articles for you right now.",
        "quizPageNewRound": "Start a new round",
        "quizPageHistory": "Your answers",
    },
    "de": {
        "quizViewAnswerHuman": "Mensch",
        "quizViewAnswerAi": "KI",
        "quizViewAnswerReal": "Echt",
        "quizViewAnswerFake": "Fake",
        "quizViewQuestionHumanAi": "Wurde dieser Artikel von einem Menschen oder einer KI geschrieben?",
        "quizViewQuestionRealFake": "Ist diese Nachricht echt oder gefälscht?",
        "quizViewSubmitButton": "Absenden",
        "quizPageTitle": "Mensch oder KI?",
        "quizPageUserLabel": "Deine Benutzer-ID",
        "quizPageStart": "Quiz starten",
        "quizPageCorrect": "Richtig!",
        "quizPageIncorrect": "Leider falsch.",
        "quizPageNext": "Nächster Artikel",
        "quizPageFinished": "Du hast diese Runde abgeschlossen.",
        "quizPageNoArticles": "Im Moment gibt es keine neuen Artikel für dich.",
        "quizPageNewRound": "Neue Runde starten",
        "quizPageHistory": "Deine Antworten",
    },
}


def get_translator(locale: str) -> Callable[[str], str]:
    """
    Returns a lookup for the quiz strings of ``locale``.
    Unknown locales use the default locale; unknown keys come back unchanged.
    """
    messages = QUIZ_MESSAGES.get(locale, {})
    fallback = QUIZ_MESSAGES.get(settings.default_locale, {})

    def translate(key: str) -> str:
        return messages.get(key) or fallback.get(key) or key

    return translate
