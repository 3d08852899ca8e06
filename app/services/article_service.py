# app/services/article_service.py
import csv
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.article import Article, MAX_ARTICLES_PER_SESSION, UserResponse
from app.models.records import ArticleRecord, UserRecord, UserResponseRecord
from app.utils.config import settings
from app.utils.logger import logger

_TRUE_VALUES = {"1", "true", "yes", "y"}
_FALSE_VALUES = {"0", "false", "no", "n"}


def _parse_flag(raw: Optional[str]) -> bool:
    value = (raw or "").strip().strip('"').lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean flag: {raw!r}")


class ArticleService:
    async def load_articles(self, session: AsyncSession, csv_path: Optional[str] = None) -> int:
        """
        Upserts the articles of a CSV file into the database.

        Expected columns: uid, headline, content, locale, is_human, is_fake.
        Malformed rows are logged and skipped. Returns the number of rows loaded.
        """
        csv_path = csv_path if csv_path is not None else settings.articles_csv_file_path
        loaded = 0
        try:
            with open(csv_path, mode="r", encoding="utf-8") as csvfile:
                reader = csv.DictReader(csvfile)
                for row in reader:
                    try:
                        uid = row["uid"].strip()
                        if not uid:
                            raise ValueError("empty uid")
                        record = ArticleRecord(
                            uid=uid,
                            headline=row["headline"].strip(),
                            content=row["content"].strip(),
                            locale=(row.get("locale") or settings.default_locale).strip(),
                            is_human=_parse_flag(row["is_human"]),
                            is_fake=_parse_flag(row["is_fake"]),
                        )
                    except ValueError as ve:
                        logger.error(f"Skipping row due to ValueError: {row} - Error: {ve}")
                        continue
                    except (KeyError, AttributeError) as ke:
                        logger.error(f"Skipping row due to missing column: {row} - Missing: {ke}")
                        continue
                    await session.merge(record)
                    loaded += 1
            await session.commit()
        except FileNotFoundError:
            logger.error(f"Articles CSV file not found at: {csv_path}")
            return 0

        logger.info(f"Loaded {loaded} articles from {csv_path}.")
        if not loaded:
            logger.warning(f"No articles loaded from {csv_path}. Check the file format and content.")
        return loaded

    async def fetch_articles_for_user(self, session: AsyncSession, user_uid: str) -> Optional[List[Article]]:
        """
        Picks up to MAX_ARTICLES_PER_SESSION articles the user has not answered yet,
        in random order. Returns None when the user has answered everything.
        """
        answered = select(UserResponseRecord.article_uid).where(UserResponseRecord.user_uid == user_uid)
        result = await session.execute(
            select(ArticleRecord)
            .where(ArticleRecord.uid.not_in(answered))
            .order_by(func.random())
            .limit(MAX_ARTICLES_PER_SESSION)
        )
        records = result.scalars().all()
        if not records:
            logger.info(f"User {user_uid} has no unanswered articles left.")
            return None
        return [Article(uid=r.uid, headline=r.headline, content=r.content) for r in records]

    async def get_user_or_create(self, session: AsyncSession, user_uid: str) -> UserRecord:
        """
        Fetches a user or adds a new one to the session.
        The caller is responsible for committing.
        """
        user = await session.get(UserRecord, user_uid)
        if not user:
            logger.info(f"Adding new user '{user_uid}' to session.")
            user = UserRecord(uid=user_uid)
            session.add(user)
        return user

    async def store_user_response(self, session: AsyncSession, response: UserResponse) -> Optional[bool]:
        """
        Grades and stores one answer. The answer is correct when both judgments
        match the article's ground truth. Returns None if the article is unknown.
        """
        article = await session.get(ArticleRecord, response.article_uid)
        if not article:
            logger.warning(f"Article {response.article_uid} not found; response of user {response.user_uid} not stored.")
            return None

        is_correct = (
            response.user_responded_is_human == article.is_human
            and response.user_responded_is_fake == article.is_fake
        )

        await self.get_user_or_create(session, response.user_uid)
        session.add(UserResponseRecord(
            user_uid=response.user_uid,
            article_uid=response.article_uid,
            user_responded_is_human=response.user_responded_is_human,
            user_responded_is_fake=response.user_responded_is_fake,
            time_to_respond=float(response.time_to_respond),
            is_correct=is_correct,
        ))
        await session.commit()
        return is_correct

    async def get_user_summary(self, session: AsyncSession, user_uid: str) -> dict:
        """Counts the answers of a user and how many of them were correct."""
        result = await session.execute(
            select(
                func.count(UserResponseRecord.id),
                func.count(UserResponseRecord.id).filter(UserResponseRecord.is_correct.is_(True)),
            ).where(UserResponseRecord.user_uid == user_uid)
        )
        answered, correct = result.one()
        return {"userUid": user_uid, "answered": answered, "correct": correct}


article_service = ArticleService()
