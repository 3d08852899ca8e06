# app/models/enums.py
from enum import Enum

class HumanAiOption(str, Enum):
    """Who the user thinks wrote the article."""
    HUMAN = "human"
    AI = "ai"

class RealFakeOption(str, Enum):
    """Whether the user thinks the article is real news or fabricated."""
    REAL = "real"
    FAKE = "fake"

class ButtonVisualState(str, Enum):
    """Visual state of a single answer button in the quiz view."""
    UNSELECTED = "unselected"
    SELECTED_HUMAN = "selected_human"
    SELECTED_AI = "selected_ai"
    SELECTED_REAL = "selected_real"
    SELECTED_FAKE = "selected_fake"
