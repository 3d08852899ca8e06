# app/services/quiz_handlers.py
"""
Request handling for ``/api/quiz``, independent of the web framework.

The handlers receive everything they need as arguments: the query mapping,
a body reader and the data-access collaborators. They never raise; every
outcome is a ``HandlerResult`` holding the status code and the JSON body.
"""
from typing import Any, Awaitable, Callable, List, Mapping, NamedTuple, Optional

from app.models.article import Article, UserResponse
from app.services.validation import (
    validate_answer_body,
    validate_answer_query,
    validate_fetch_query,
)
from app.utils.logger import logger

QUESTIONS_NOT_FOUND = "Quiz questions not found"
RESPONSE_NOT_STORED = "User response not stored"
INTERNAL_ERROR = "Internal Server Error"

FetchArticles = Callable[[str], Awaitable[Optional[List[Article]]]]
StoreResponse = Callable[[UserResponse], Awaitable[Any]]
ReadBody = Callable[[], Awaitable[Any]]


class HandlerResult(NamedTuple):
    status_code: int
    body: Any


def _error(status_code: int, message: str) -> HandlerResult:
    return HandlerResult(status_code, {"error": message})


async def handle_fetch_quiz(query: Optional[Mapping[str, Any]], fetch_articles: FetchArticles) -> HandlerResult:
    """
    Returns a set of quiz articles for the user.

    200 with the list of articles, 400 on invalid query parameters,
    404 when there is nothing to serve and 500 on any other failure.
    """
    try:
        validated = validate_fetch_query(query)
        if not validated.ok:
            logger.debug(f"Rejected quiz fetch: {validated.error}")
            return _error(400, validated.error)

        user_uid = validated.value.user_uid
        # TODO: forward locale once fetch_articles_for_user can filter by it
        logger.debug(f"Fetching quiz for user {user_uid} (locale '{validated.value.locale}' is not used for selection)")
        articles = await fetch_articles(user_uid)
        if not articles:
            logger.warning(f"No quiz articles found for user {user_uid}")
            return _error(404, QUESTIONS_NOT_FOUND)

        return HandlerResult(200, [
            article.model_dump(by_alias=True) if isinstance(article, Article) else article
            for article in articles
        ])
    except Exception:
        logger.exception("Unexpected error while fetching quiz articles")
        return _error(500, INTERNAL_ERROR)


async def handle_submit_answer(
    query: Optional[Mapping[str, Any]],
    read_body: ReadBody,
    store_response: StoreResponse,
) -> HandlerResult:
    """
    Records the user's answer to one article and reports whether it was correct.

    ``read_body`` returns the parsed JSON body, or raises ``ValueError`` when the
    body is absent or is not valid JSON.
    """
    try:
        validated_query = validate_answer_query(query)
        if not validated_query.ok:
            logger.debug(f"Rejected answer submission: {validated_query.error}")
            return _error(400, validated_query.error)
        user_uid = validated_query.value

        try:
            body = await read_body()
        except ValueError:
            body = None
        validated_body = validate_answer_body(body)
        if not validated_body.ok:
            logger.debug(f"Rejected answer submission from user {user_uid}: {validated_body.error}")
            return _error(400, validated_body.error)
        answer = validated_body.value

        is_correct = await store_response(UserResponse(
            user_uid=user_uid,
            article_uid=answer.article_uid,
            user_responded_is_human=answer.user_responded_is_human,
            user_responded_is_fake=answer.user_responded_is_fake,
            time_to_respond=answer.time_to_respond,
        ))
        if not isinstance(is_correct, bool):
            logger.warning(f"Response of user {user_uid} to article {answer.article_uid} was not stored")
            return _error(404, RESPONSE_NOT_STORED)

        logger.info(f"Stored response of user {user_uid} to article {answer.article_uid}: correct={is_correct}")
        return HandlerResult(200, {"isCorrect": is_correct})
    except Exception:
        logger.exception("Unexpected error while storing a quiz answer")
        return _error(500, INTERNAL_ERROR)
