# tests/conftest.py
import logging
import os
import shutil
import tempfile

import pytest
from fastapi.testclient import TestClient

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
TEST_ARTICLES_CSV = os.path.join(PROJECT_ROOT, "data", "test_articles.csv")
TEST_DB_DIR = tempfile.mkdtemp(prefix="news_quiz_test_")
TEST_DB_PATH = os.path.join(TEST_DB_DIR, "test_quiz.db")

# Settings are read when app.utils.config is first imported, so point them at
# the test database and articles before any app module is loaded.
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["ARTICLES_CSV_FILE_PATH"] = TEST_ARTICLES_CSV
os.environ["LOG_LEVEL"] = "DEBUG"

from app.utils.config import settings  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def verify_test_settings():
    if not os.path.exists(TEST_ARTICLES_CSV):
        pytest.fail(f"Test articles file not found at: {TEST_ARTICLES_CSV}")
    assert settings.database_url.startswith("sqlite+aiosqlite://"), settings.database_url
    logger.info(f"Using test database at {TEST_DB_PATH}")
    yield
    shutil.rmtree(TEST_DB_DIR, ignore_errors=True)
    logger.info(f"Removed test database directory {TEST_DB_DIR}")


@pytest.fixture(scope="session")
def client(verify_test_settings):
    """
    Creates the TestClient once per session. Entering it runs the app
    lifespan, which creates the tables and loads the test articles.
    """
    from app.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_uid(request):
    """A user id unique to the running test, so database state never leaks between tests."""
    return f"user-{request.node.name}"


@pytest.fixture
def valid_answer():
    return {
        "articleUid": "t-01",
        "userRespondedIsHuman": True,
        "userRespondedIsFake": False,
        "timeToRespond": 4200,
    }
