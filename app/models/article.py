# app/models/article.py
from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Union

from app.utils.config import settings

# Upper bound of one quiz run; also the length of the progress indicator
MAX_ARTICLES_PER_SESSION: int = settings.max_articles_per_session


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Article(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    uid: str
    headline: str
    content: str  # May contain HTML entities, decoded before display


class QuizSession(CamelModel):
    articles: List[Article]
    current_article_index: int = 0

    @model_validator(mode="after")
    def check_index_in_range(self):
        if not self.articles:
            raise ValueError("A quiz session needs at least one article")
        if len(self.articles) > MAX_ARTICLES_PER_SESSION:
            raise ValueError(
                f"A quiz session holds at most {MAX_ARTICLES_PER_SESSION} articles, got {len(self.articles)}"
            )
        if not 0 <= self.current_article_index < len(self.articles):
            raise ValueError(
                f"currentArticleIndex {self.current_article_index} out of range for {len(self.articles)} articles"
            )
        return self

    @property
    def current_article(self) -> Article:
        return self.articles[self.current_article_index]

    @property
    def is_last_article(self) -> bool:
        return self.current_article_index == len(self.articles) - 1


class UserResponse(CamelModel):
    user_uid: StrictStr
    article_uid: StrictStr
    user_responded_is_human: StrictBool
    user_responded_is_fake: StrictBool
    time_to_respond: Union[StrictInt, StrictFloat]  # milliseconds


class QuizAnswer(CamelModel):
    """Combined answer the quiz view hands to its submit callback."""
    human_option_selected: bool
    is_fake_selected: bool
