# streamlit_app/app.py
import time

import streamlit as st
from sqlalchemy.orm import sessionmaker

from app.models.article import QuizAnswer
from app.utils.config import settings
from app.utils.logger import logger
from streamlit_app.api_client import QuizApiClient, QuizApiError
from streamlit_app.queries import create_sync_engine, get_accuracy, get_response_history
from streamlit_app.quiz_view import QuizViewState, render_quiz_view
from streamlit_app.translations import get_translator

# --- Page Config ---
st.set_page_config(layout="wide", page_title="Human or AI? News Quiz")

@st.cache_resource
def get_api_client() -> QuizApiClient:
    """Creates a cached API client."""
    return QuizApiClient()

@st.cache_resource
def get_db_engine():
    """Creates a cached SQLAlchemy engine for the results tab."""
    return create_sync_engine(settings.database_url)

client = get_api_client()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_db_engine())

# --- Session State ---
st.session_state.setdefault("quiz_session", None)
st.session_state.setdefault("view_state", QuizViewState())
st.session_state.setdefault("article_started_at", None)
st.session_state.setdefault("last_result", None)
st.session_state.setdefault("finished", False)

# --- Sidebar ---
locale = st.sidebar.selectbox(
    "Language",
    options=settings.supported_locales,
    index=settings.supported_locales.index(settings.default_locale),
    key="locale_selector",
)
t = get_translator(locale)
user_uid = st.sidebar.text_input(t("quizPageUserLabel"), key="user_uid").strip()

st.title(t("quizPageTitle"))

if 'error_message' in st.session_state:
    st.error(st.session_state.error_message, icon="🚨")
    del st.session_state.error_message


def start_round():
    try:
        quiz_session = client.fetch_quiz_session(user_uid, locale)
    except (QuizApiError, ValueError) as e:
        st.session_state.error_message = f"Could not load the quiz: {e}"
        return
    except Exception as e:
        logger.exception("Quiz API unreachable")
        st.session_state.error_message = f"Could not reach the quiz API: {e}"
        return
    st.session_state.quiz_session = quiz_session
    st.session_state.view_state = QuizViewState()
    st.session_state.article_started_at = time.monotonic()
    st.session_state.last_result = None
    st.session_state.finished = quiz_session is None


def submit_answer(answer: QuizAnswer):
    quiz_session = st.session_state.quiz_session
    elapsed_ms = (time.monotonic() - st.session_state.article_started_at) * 1000
    try:
        st.session_state.last_result = client.submit_answer(
            user_uid,
            quiz_session.current_article.uid,
            answer.human_option_selected,
            answer.is_fake_selected,
            round(elapsed_ms),
        )
    except QuizApiError as e:
        st.session_state.error_message = f"Your answer was not saved: {e.message}"
    except Exception as e:
        logger.exception("Quiz API unreachable")
        st.session_state.error_message = f"Could not reach the quiz API: {e}"


def next_article():
    quiz_session = st.session_state.quiz_session
    st.session_state.last_result = None
    if quiz_session.is_last_article:
        st.session_state.finished = True
        return
    st.session_state.quiz_session = quiz_session.model_copy(
        update={"current_article_index": quiz_session.current_article_index + 1}
    )
    st.session_state.view_state = QuizViewState()
    st.session_state.article_started_at = time.monotonic()


if not user_uid:
    st.stop()

if st.session_state.quiz_session is None and not st.session_state.finished:
    st.button(t("quizPageStart"), type="primary", on_click=start_round)
    st.stop()

if st.session_state.finished:
    if st.session_state.quiz_session is None:
        st.info(t("quizPageNoArticles"))
    else:
        st.success(t("quizPageFinished"), icon="✅")

    st.subheader(t("quizPageHistory"))
    db = SessionLocal()
    try:
        history = get_response_history(db, user_uid)
    except Exception as e:
        st.warning(f"Failed to load your answers: {e}")
        history = None
    finally:
        db.close()
    if history is not None and not history.empty:
        st.metric("Accuracy", f"{get_accuracy(history):.0%}")
        st.dataframe(history, width='stretch', hide_index=True)
    st.button(t("quizPageNewRound"), type="primary", on_click=start_round)
    st.stop()

if st.session_state.last_result is None:
    render_quiz_view(
        st.session_state.quiz_session,
        st.session_state.view_state,
        on_submit=submit_answer,
        translate=t,
    )
else:
    if st.session_state.last_result:
        st.success(t("quizPageCorrect"), icon="✅")
    else:
        st.warning(t("quizPageIncorrect"), icon="❌")
    st.button(t("quizPageNext"), type="primary", on_click=next_article)
