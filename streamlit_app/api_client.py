# streamlit_app/api_client.py
from typing import Optional

import requests

from app.models.article import Article, MAX_ARTICLES_PER_SESSION, QuizSession
from app.utils.config import settings
from app.utils.logger import logger


class QuizApiError(Exception):
    """Raised when the quiz API answers with an unexpected status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(response: requests.Response) -> str:
    try:
        return response.json().get("error", response.text)
    except (ValueError, AttributeError):
        return response.text


class QuizApiClient:
    """Thin client for ``/api/quiz`` used by the Streamlit page."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout_seconds
        self.http = session or requests.Session()

    @property
    def quiz_url(self) -> str:
        return f"{self.base_url}/api/quiz"

    def fetch_quiz_session(self, user_uid: str, locale: str) -> Optional[QuizSession]:
        """Starts a new quiz run. Returns None when the user has no articles left."""
        response = self.http.get(self.quiz_url, params={"userUid": user_uid, "locale": locale}, timeout=self.timeout)
        if response.status_code == 404:
            logger.info(f"No quiz articles available for user {user_uid}")
            return None
        if response.status_code != 200:
            raise QuizApiError(response.status_code, _error_message(response))

        articles = [Article.model_validate(item) for item in response.json()]
        if not articles:
            return None
        return QuizSession(articles=articles[:MAX_ARTICLES_PER_SESSION], current_article_index=0)

    def submit_answer(
        self,
        user_uid: str,
        article_uid: str,
        responded_is_human: bool,
        responded_is_fake: bool,
        time_to_respond: float,
    ) -> bool:
        """Posts one answer and returns whether it was correct."""
        response = self.http.post(
            self.quiz_url,
            params={"userUid": user_uid},
            json={
                "articleUid": article_uid,
                "userRespondedIsHuman": responded_is_human,
                "userRespondedIsFake": responded_is_fake,
                "timeToRespond": time_to_respond,
            },
            timeout=self.timeout,
        )
        if response.status_code != 200:
            raise QuizApiError(response.status_code, _error_message(response))
        return bool(response.json()["isCorrect"])
