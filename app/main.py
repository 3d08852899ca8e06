# FastAPI entry point for the news quiz API
# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.endpoints import quiz as quiz_router
from app.services.article_service import article_service
from app.utils.config import settings
from app.utils.logger import logger
from app.utils.db import AsyncSessionLocal, init_db

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("News Quiz API starting up...")

    await init_db()

    logger.info("Loading articles...")
    async with AsyncSessionLocal() as session:
        await article_service.load_articles(session, settings.articles_csv_file_path)

    logger.info("Startup complete.")
    yield
    logger.info("News Quiz API shutting down...")

app = FastAPI(
    title="News Quiz API",
    description="Serves quiz articles and records whether users spot human vs. AI and real vs. fake news.",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this to your frontend's domain
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router.router, prefix="/api/quiz", tags=["Quiz"])

@app.get("/")
async def root():
    return {"message": "Welcome to the News Quiz API"}
