# app/services/validation.py
"""
Validation of the quiz endpoints' query parameters and JSON bodies.

Each validator applies its checks in a fixed order and stops at the first
failure. The outcome is a ``ValidationResult``: either ``ok`` with the
validated value, or not ``ok`` with the client-facing error message.
"""
import math
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar

T = TypeVar("T")

INVALID_QUERY = "Invalid query parameters"
USER_ID_REQUIRED = "User ID is required"
INVALID_USER_ID = "Invalid User ID"
LOCALE_REQUIRED = "Locale is required"
INVALID_LOCALE = "Invalid Locale"
INVALID_BODY = "Invalid request body"
ARTICLE_ID_REQUIRED = "Article ID is required"
INVALID_ARTICLE_ID = "Invalid Article ID"
INVALID_USER_RESPONSE = "Invalid user response"
INVALID_TIME_TO_RESPOND = "Invalid time to respond"


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ValidationResult[T]":
        return cls(ok=False, error=error)


@dataclass(frozen=True)
class FetchQuery:
    user_uid: str
    locale: str


@dataclass(frozen=True)
class AnswerBody:
    article_uid: str
    user_responded_is_human: bool
    user_responded_is_fake: bool
    time_to_respond: float


def _is_number(value: Any) -> bool:
    # bool is an int subclass, but true/false are not response times
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_missing(value: Any) -> bool:
    """Absent or one of the JSON falsy scalars: null, false, 0, NaN or the empty string."""
    if value is None or value is False or value == "":
        return True
    return _is_number(value) and (value == 0 or value != value)


def _to_time_to_respond(value: Any) -> Optional[float]:
    """Milliseconds as a finite float, or None when the value cannot be one."""
    if not _is_number(value):
        return None
    try:
        milliseconds = float(value)
    except OverflowError:
        return None
    return milliseconds if math.isfinite(milliseconds) else None


def validate_fetch_query(query: Optional[Mapping[str, Any]]) -> ValidationResult[FetchQuery]:
    if query is None:
        return ValidationResult.failure(INVALID_QUERY)

    user_uid = query.get("userUid")
    locale = query.get("locale")
    if _is_missing(user_uid):
        return ValidationResult.failure(USER_ID_REQUIRED)
    if _is_missing(locale):
        return ValidationResult.failure(LOCALE_REQUIRED)
    if not isinstance(user_uid, str):
        return ValidationResult.failure(INVALID_USER_ID)
    if not isinstance(locale, str):
        return ValidationResult.failure(INVALID_LOCALE)

    return ValidationResult.success(FetchQuery(user_uid=user_uid, locale=locale))


def validate_answer_query(query: Optional[Mapping[str, Any]]) -> ValidationResult[str]:
    """Returns the validated ``userUid`` of an answer submission."""
    if query is None:
        return ValidationResult.failure(INVALID_QUERY)

    user_uid = query.get("userUid")
    if _is_missing(user_uid):
        return ValidationResult.failure(USER_ID_REQUIRED)
    if not isinstance(user_uid, str):
        return ValidationResult.failure(INVALID_USER_ID)

    return ValidationResult.success(user_uid)


def validate_answer_body(body: Any) -> ValidationResult[AnswerBody]:
    if not isinstance(body, Mapping):
        return ValidationResult.failure(INVALID_BODY)

    article_uid = body.get("articleUid")
    if _is_missing(article_uid):
        return ValidationResult.failure(ARTICLE_ID_REQUIRED)
    if not isinstance(article_uid, str):
        return ValidationResult.failure(INVALID_ARTICLE_ID)

    is_human = body.get("userRespondedIsHuman")
    if not isinstance(is_human, bool):
        return ValidationResult.failure(INVALID_USER_RESPONSE)

    is_fake = body.get("userRespondedIsFake")
    if not isinstance(is_fake, bool):
        return ValidationResult.failure(INVALID_USER_RESPONSE)

    time_to_respond = _to_time_to_respond(body.get("timeToRespond"))
    if time_to_respond is None:
        return ValidationResult.failure(INVALID_TIME_TO_RESPOND)

    return ValidationResult.success(AnswerBody(
        article_uid=article_uid,
        user_responded_is_human=is_human,
        user_responded_is_fake=is_fake,
        time_to_respond=time_to_respond,
    ))
