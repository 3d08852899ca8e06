# app/models/records.py
from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    DateTime,
    ForeignKey,
    Text,
    Boolean,
)
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime


Base = declarative_base()


class UserRecord(Base):
    __tablename__ = "users"
    uid = Column(String, primary_key=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    responses = relationship("UserResponseRecord", back_populates="user")


class ArticleRecord(Base):
    __tablename__ = "articles"
    uid = Column(String, primary_key=True, index=True)
    headline = Column(String, nullable=False)
    content = Column(Text, nullable=False)  # May hold HTML entities
    locale = Column(String, index=True, nullable=False)

    # Ground truth used to grade answers
    is_human = Column(Boolean, nullable=False)
    is_fake = Column(Boolean, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    responses = relationship("UserResponseRecord", back_populates="article")


class UserResponseRecord(Base):
    __tablename__ = "user_responses"
    id = Column(Integer, primary_key=True, index=True)
    user_uid = Column(String, ForeignKey("users.uid"), index=True)
    article_uid = Column(String, ForeignKey("articles.uid"), index=True)

    user_responded_is_human = Column(Boolean, nullable=False)
    user_responded_is_fake = Column(Boolean, nullable=False)
    time_to_respond = Column(Float, nullable=False)
    is_correct = Column(Boolean, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("UserRecord", back_populates="responses")
    article = relationship("ArticleRecord", back_populates="responses")
