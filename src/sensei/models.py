from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from . import config


class WireModel(BaseModel):
    """Base for every record that crosses the JSON boundary (camelCase keys)."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


# Lesson content
class InputMode(str, Enum):
    """
    How the learner answers a scene.
    The wire values are the ones the lesson frontend switches on.
    """
    CHOICE = "choice"
    FREE_TEXT = "text"


class Option(WireModel):
    """An authored answer button inside a choice scene."""
    text: str = Field(description="Text shown on the button.")
    reaction: str = Field(description="What the character says after this option is picked.")
    is_correct: bool = Field(description="Whether picking this option lets the learner continue.")
    reaction_image: Optional[str] = Field(default=None, description="Expression asset shown with the reaction.")


class Scene(WireModel):
    """One screen of the dialogue script."""
    position: int = Field(ge=0, description="0-based index inside the lesson; dispatch key for text rules.")
    input_type: InputMode
    character_name: str
    character_mood: str = Field(description="Expression asset file name, e.g. 'Muka_sari_senang.png'.")
    dialogue: str
    options: Tuple[Option, ...] = Field(default=(), description="Empty for free-text scenes.")

    @property
    def correct_option(self) -> Optional[Option]:
        for option in self.options:
            if option.is_correct:
                return option
        return None


class Lesson(WireModel):
    """A titled, ordered sequence of scenes."""
    id: str
    title: str
    scenes: Tuple[Scene, ...]


# Evaluation
class Verdict(WireModel):
    """Outcome of evaluating one learner answer."""
    is_correct: bool
    reaction: str = Field(description="In-character reply to the answer.")
    feedback: str = Field(description="Sensei explanation; may mix Indonesian and Japanese.")
    reaction_image: Optional[str] = None


class EvaluationRule(WireModel):
    """
    One pattern -> verdict binding of a free-text scene.

    `contains` lists literal lowercase substrings; the rule matches when any of
    them occurs in the normalized answer. An empty list makes the rule the
    scene's catch-all.
    """
    contains: Tuple[str, ...] = ()
    verdict: Verdict

    @property
    def is_catch_all(self) -> bool:
        return not self.contains

    def matches(self, normalized_answer: str) -> bool:
        if self.is_catch_all:
            return True
        return any(literal in normalized_answer for literal in self.contains)


class RuleBook(WireModel):
    """Ordered rule sets of one lesson, keyed by scene position."""
    lesson_id: str
    rule_sets: Mapping[int, Tuple[EvaluationRule, ...]] = Field(default_factory=dict, validate_default=True)

    @field_validator("rule_sets")
    @classmethod
    def freeze_rule_sets(cls, value):
        return MappingProxyType(dict(value))

    def rules_for(self, position: int) -> Optional[Tuple[EvaluationRule, ...]]:
        return self.rule_sets.get(position)


# Tutor
class TutorState(str, Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting-response"


class TutorTurn(WireModel):
    """One question to the tutor and its reply. Never stored."""
    context: str
    user_query: str
    reply: str


# Request / response bodies
class TextAnswerRequest(WireModel):
    scene_index: int
    answer: str
    lesson_id: str = config.DEFAULT_LESSON_ID


class ChoiceRequest(WireModel):
    scene_index: int
    option_index: int
    lesson_id: str = config.DEFAULT_LESSON_ID


class ChatRequest(WireModel):
    context: str = Field(description="The story situation the learner is looking at.")
    user_query: str = Field(description="What the learner actually typed.")


class ChatResponse(WireModel):
    reply: str


# Dashboard
class LearningModule(WireModel):
    """A learning unit card on the home screen."""
    id: str
    title: str
    icon: str
    done: bool
    color: str


class Profile(WireModel):
    display_name: str
    username: str
    level: int
    progress: float = Field(ge=0.0, le=1.0)


class DashboardState(WireModel):
    streak_days: int
    xp: int
    current_lesson: str
    modules: List[LearningModule]
    profile: Profile
