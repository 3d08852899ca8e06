# streamlit_app/quiz_view.py
"""
Presentational quiz view: one article, two answer groups and a submit button.

The view owns no data. The caller passes in the quiz session and the selection
state, and receives the combined answer through ``on_submit``. The view makes
no network or storage calls and never resets the selection; advancing to the
next article is the caller's job.
"""
import html
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

import streamlit as st

from app.models.article import MAX_ARTICLES_PER_SESSION, QuizAnswer, QuizSession
from app.models.enums import ButtonVisualState, HumanAiOption, RealFakeOption

Variant = Union[HumanAiOption, RealFakeOption]


@dataclass
class QuizViewState:
    """Selection state for the current article. Both selectors start unset."""
    human_ai_option: Optional[HumanAiOption] = None
    real_fake_option: Optional[RealFakeOption] = None

    def select_human_ai(self, option: HumanAiOption):
        self.human_ai_option = HumanAiOption(option)

    def select_real_fake(self, option: RealFakeOption):
        self.real_fake_option = RealFakeOption(option)

    @property
    def can_submit(self) -> bool:
        return self.human_ai_option is not None and self.real_fake_option is not None

    def to_answer(self) -> QuizAnswer:
        if not self.can_submit:
            raise ValueError("Both questions must be answered before submitting")
        return QuizAnswer(
            human_option_selected=self.human_ai_option == HumanAiOption.HUMAN,
            is_fake_selected=self.real_fake_option == RealFakeOption.FAKE,
        )


@dataclass(frozen=True)
class ButtonStyle:
    button_type: str  # streamlit button type
    icon: str
    color: Optional[str] = None  # label colour, None keeps the theme default


# Real is affirmative (green), fake is negative (red); a selected button is filled.
BUTTON_STYLES = {
    (HumanAiOption.HUMAN, ButtonVisualState.UNSELECTED): ButtonStyle("secondary", ":material/check_box_outline_blank:"),
    (HumanAiOption.AI, ButtonVisualState.UNSELECTED): ButtonStyle("secondary", ":material/check_box_outline_blank:"),
    (HumanAiOption.HUMAN, ButtonVisualState.SELECTED_HUMAN): ButtonStyle("primary", ":material/check_box:"),
    (HumanAiOption.AI, ButtonVisualState.SELECTED_AI): ButtonStyle("primary", ":material/check_box:"),
    (RealFakeOption.REAL, ButtonVisualState.UNSELECTED): ButtonStyle("secondary", ":material/verified_user:", "green"),
    (RealFakeOption.FAKE, ButtonVisualState.UNSELECTED): ButtonStyle("secondary", ":material/gpp_bad:", "red"),
    (RealFakeOption.REAL, ButtonVisualState.SELECTED_REAL): ButtonStyle("primary", ":material/verified_user:"),
    (RealFakeOption.FAKE, ButtonVisualState.SELECTED_FAKE): ButtonStyle("primary", ":material/gpp_bad:"),
}

_SELECTED_STATES = {
    HumanAiOption.HUMAN: ButtonVisualState.SELECTED_HUMAN,
    HumanAiOption.AI: ButtonVisualState.SELECTED_AI,
    RealFakeOption.REAL: ButtonVisualState.SELECTED_REAL,
    RealFakeOption.FAKE: ButtonVisualState.SELECTED_FAKE,
}

_LABEL_KEYS = {
    HumanAiOption.HUMAN: "quizViewAnswerHuman",
    HumanAiOption.AI: "quizViewAnswerAi",
    RealFakeOption.REAL: "quizViewAnswerReal",
    RealFakeOption.FAKE: "quizViewAnswerFake",
}


def resolve_button_state(variant: Variant, state: QuizViewState) -> ButtonVisualState:
    selected = state.human_ai_option if isinstance(variant, HumanAiOption) else state.real_fake_option
    if selected == variant:
        return _SELECTED_STATES[variant]
    return ButtonVisualState.UNSELECTED


def resolve_button_style(variant: Variant, state: QuizViewState) -> ButtonStyle:
    return BUTTON_STYLES[(variant, resolve_button_state(variant, state))]


@dataclass(frozen=True)
class ProgressMarker:
    completed: bool  # current article counts as reached
    current: bool


def progress_markers(current_index: int, max_markers: int = MAX_ARTICLES_PER_SESSION) -> List[ProgressMarker]:
    return [
        ProgressMarker(completed=index < current_index + 1, current=index == current_index)
        for index in range(max_markers)
    ]


def format_progress(markers: List[ProgressMarker]) -> str:
    symbols = []
    for marker in markers:
        shape = "▬" if marker.current else "●"
        color = "blue" if marker.completed else "gray"
        symbols.append(f":{color}[{shape}]")
    return " ".join(symbols)


def decode_html_entities(text: str) -> str:
    return html.unescape(text)


def _label(text: str, style: ButtonStyle) -> str:
    return f":{style.color}[{text}]" if style.color else text


def _render_option_button(variant: Variant, state: QuizViewState, translate: Callable[[str], str], key_prefix: str):
    style = resolve_button_style(variant, state)
    select = state.select_human_ai if isinstance(variant, HumanAiOption) else state.select_real_fake
    st.button(
        _label(translate(_LABEL_KEYS[variant]), style),
        key=f"{key_prefix}_{variant.value}",
        type=style.button_type,
        icon=style.icon,
        on_click=select,
        args=(variant,),
        width="stretch",
    )


def render_quiz_view(
    quiz_session: QuizSession,
    state: QuizViewState,
    on_submit: Callable[[QuizAnswer], None],
    translate: Callable[[str], str],
    key_prefix: str = "quiz",
):
    """Draws the current article of ``quiz_session`` with its answer controls."""
    article = quiz_session.current_article

    # Article
    st.subheader(article.headline)
    with st.container(border=True, height=400):
        st.markdown("\n".join(f"> {line}" for line in decode_html_entities(article.content).splitlines()))

    # Human or AI
    st.caption(translate("quizViewQuestionHumanAi"))
    left, right = st.columns(2)
    with left:
        _render_option_button(HumanAiOption.HUMAN, state, translate, key_prefix)
    with right:
        _render_option_button(HumanAiOption.AI, state, translate, key_prefix)

    # Real or fake
    st.caption(translate("quizViewQuestionRealFake"))
    left, right = st.columns(2)
    with left:
        _render_option_button(RealFakeOption.REAL, state, translate, key_prefix)
    with right:
        _render_option_button(RealFakeOption.FAKE, state, translate, key_prefix)

    # Progress and submit
    progress_col, submit_col = st.columns([3, 1])
    with progress_col:
        st.markdown(format_progress(progress_markers(quiz_session.current_article_index)))
    with submit_col:
        def submit():
            if state.can_submit:
                on_submit(state.to_answer())

        st.button(
            translate("quizViewSubmitButton"),
            key=f"{key_prefix}_submit",
            type="primary",
            icon=":material/send:",
            disabled=not state.can_submit,
            on_click=submit,
            width="stretch",
        )
