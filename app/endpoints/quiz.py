# app/endpoints/quiz.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.article import UserResponse
from app.services.article_service import article_service
from app.services.quiz_handlers import handle_fetch_quiz, handle_submit_answer
from app.services.validation import validate_answer_query
from app.utils.db import get_db
from app.utils.logger import logger

router = APIRouter()


async def _read_json_body(request: Request):
    raw = await request.body()
    if not raw:
        raise ValueError("empty request body")
    # json.JSONDecodeError is a ValueError
    return await request.json()


@router.get("")
async def get_quiz(request: Request, db: AsyncSession = Depends(get_db)):
    """Returns a set of quiz articles for ``userUid``; ``locale`` is required."""
    async def fetch_articles(user_uid: str):
        return await article_service.fetch_articles_for_user(db, user_uid)

    result = await handle_fetch_quiz(request.query_params, fetch_articles)
    return JSONResponse(result.body, status_code=result.status_code)


@router.post("")
async def post_quiz(request: Request, db: AsyncSession = Depends(get_db)):
    """
    Records the answer of ``userUid`` to one article.
    Body: {articleUid, userRespondedIsHuman, userRespondedIsFake, timeToRespond}
    """
    async def read_body():
        return await _read_json_body(request)

    async def store_response(response: UserResponse):
        return await article_service.store_user_response(db, response)

    result = await handle_submit_answer(request.query_params, read_body, store_response)
    return JSONResponse(result.body, status_code=result.status_code)


@router.get("/summary")
async def get_quiz_summary(request: Request, db: AsyncSession = Depends(get_db)):
    """Answered and correct counts for one user."""
    validated = validate_answer_query(request.query_params)
    if not validated.ok:
        return JSONResponse({"error": validated.error}, status_code=400)
    logger.debug(f"Fetching quiz summary for user {validated.value}")
    return await article_service.get_user_summary(db, validated.value)
