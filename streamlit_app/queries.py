# streamlit_app/queries.py
import pandas as pd
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from app.models.records import ArticleRecord, UserResponseRecord

HISTORY_COLUMNS = ["Answered At", "Headline", "Said Human?", "Said Fake?", "Seconds", "Correct?"]


def to_sync_url(db_url: str) -> str:
    """Maps the API's async driver URL onto its synchronous counterpart."""
    return (
        db_url
        .replace("postgresql+asyncpg://", "postgresql+psycopg2://")
        .replace("sqlite+aiosqlite://", "sqlite://")
    )


def create_sync_engine(db_url: str):
    return create_engine(to_sync_url(db_url))


def get_response_history(db: Session, user_uid: str) -> pd.DataFrame:
    """Fetches a user's answers, newest first, as a Pandas DataFrame."""
    rows = (
        db.query(UserResponseRecord, ArticleRecord.headline)
        .join(ArticleRecord, ArticleRecord.uid == UserResponseRecord.article_uid)
        .filter(UserResponseRecord.user_uid == user_uid)
        .order_by(UserResponseRecord.created_at.desc())
        .all()
    )
    if not rows:
        return pd.DataFrame(columns=HISTORY_COLUMNS)

    data = {
        "Answered At": [r.created_at.strftime('%Y-%m-%d %H:%M:%S') for r, _ in rows],
        "Headline": [headline for _, headline in rows],
        "Said Human?": [r.user_responded_is_human for r, _ in rows],
        "Said Fake?": [r.user_responded_is_fake for r, _ in rows],
        "Seconds": [round(r.time_to_respond / 1000, 1) for r, _ in rows],
        "Correct?": [r.is_correct for r, _ in rows],
    }
    return pd.DataFrame(data, columns=HISTORY_COLUMNS)


def get_accuracy(history: pd.DataFrame) -> float:
    """Share of correct answers in a history frame, 0.0 when it is empty."""
    if history.empty:
        return 0.0
    return float(history["Correct?"].astype(bool).mean())
