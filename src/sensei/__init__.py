# src/sensei/__init__.py
"""Core modules for the Sensei dialogue tutor"""

from .lesson_engine import LessonEngine, compose_reaction, next_position
from .models import Lesson, Scene, Option, Verdict, EvaluationRule, RuleBook, TutorTurn, InputMode
from .scene_store import SceneGraphStore, LessonNotFoundError, SceneNotFoundError
from .choice_resolver import resolve_choice, OptionIndexError
from .rule_evaluator import RuleEvaluator, UNKNOWN_SCENE_VERDICT
from .tutor_bridge import TutorBridge, CONNECTION_FAILED_REPLY, NO_ANSWER_REPLY
from .completion_service import CompletionService, CompletionResult, Candidate, GeminiCompletionService
from .dashboard import get_dashboard_state
from .i18n import get_ui_text, SUPPORTED_LANGUAGES
from . import config

__all__ = [
    'LessonEngine',
    'compose_reaction',
    'next_position',
    'Lesson',
    'Scene',
    'Option',
    'Verdict',
    'EvaluationRule',
    'RuleBook',
    'TutorTurn',
    'InputMode',
    'SceneGraphStore',
    'LessonNotFoundError',
    'SceneNotFoundError',
    'resolve_choice',
    'OptionIndexError',
    'RuleEvaluator',
    'UNKNOWN_SCENE_VERDICT',
    'TutorBridge',
    'CONNECTION_FAILED_REPLY',
    'NO_ANSWER_REPLY',
    'CompletionService',
    'CompletionResult',
    'Candidate',
    'GeminiCompletionService',
    'get_dashboard_state',
    'get_ui_text',
    'SUPPORTED_LANGUAGES',
    'config'
]
