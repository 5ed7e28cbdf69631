#!/usr/bin/env python3
"""
LessonEngine - Main Orchestrator

Coordinates the lesson modules for one running app:
- SceneGraphStore: the authored script
- resolve_choice: button answers
- RuleEvaluator: typed answers, one per lesson rule book
- TutorBridge: "ask Sensei" questions

Scripted answers never reach the tutor; the tutor is only used for
open-ended questions.
"""

import logging
from typing import Dict, Optional

from .choice_resolver import resolve_choice
from .completion_service import CompletionService
from .models import Lesson, Option, TutorTurn, Verdict
from .prompts_template import build_scene_context
from .rule_evaluator import UNKNOWN_SCENE_VERDICT, RuleEvaluator
from .scene_store import LessonNotFoundError, SceneGraphStore
from .tutor_bridge import TutorBridge

logger = logging.getLogger(__name__)


def next_position(lesson: Lesson, position: int, is_correct: bool) -> Optional[int]:
    """
    Where the learner goes after answering the scene at position.

    Returns:
        Optional[int]: the same position to retry a wrong answer, the next
        position after a right one, or None once the lesson is complete
    """
    if not is_correct:
        return position
    following = position + 1
    if following >= len(lesson.scenes):
        return None
    return following


def compose_reaction(verdict: Verdict) -> str:
    """Character reaction followed by Sensei's explanation, as shown in the dialogue box."""
    return f"{verdict.reaction}\n\n(🇯🇵 Sensei: {verdict.feedback})"


class LessonEngine:
    """
    Entry point for everything the lesson screens need.

    Holds no per-learner state: the client keeps track of its scene position.
    """

    def __init__(self, completion_service: CompletionService, store: Optional[SceneGraphStore] = None):
        """
        Args:
            completion_service: Backend for the tutor (Gemini in production)
            store: Lesson content. If None, the bundled lessons are loaded.
        """
        self.store = store or SceneGraphStore()
        self.evaluators: Dict[str, RuleEvaluator] = {
            lesson_id: RuleEvaluator(self.store.get_rulebook(lesson_id)) for lesson_id in self.store.lesson_ids()
        }
        self.tutor = TutorBridge(completion_service)
        logger.info("LessonEngine ready with %d lesson(s)", len(self.evaluators))

    def get_lesson(self, lesson_id: str) -> Lesson:
        return self.store.get_lesson(lesson_id)

    def choose(self, lesson_id: str, position: int, option_index: int) -> Option:
        """Resolve a button answer. Raises LessonNotFoundError, SceneNotFoundError or OptionIndexError."""
        scene = self.store.get_scene(lesson_id, position)
        return resolve_choice(scene, option_index)

    def check_text(self, lesson_id: str, position: int, answer: str) -> Verdict:
        """Evaluate a typed answer. Always returns a verdict."""
        evaluator = self.evaluators.get(lesson_id)
        if evaluator is None:
            logger.warning("Text answer for unknown lesson '%s'", lesson_id)
            return UNKNOWN_SCENE_VERDICT
        return evaluator.evaluate(position, answer)

    def ask_tutor(self, context_info: str, user_query: str) -> TutorTurn:
        reply = self.tutor.ask(context_info, user_query)
        return TutorTurn(context=context_info, user_query=user_query, reply=reply)

    async def aask_tutor(self, context_info: str, user_query: str) -> TutorTurn:
        reply = await self.tutor.aask(context_info, user_query)
        return TutorTurn(context=context_info, user_query=user_query, reply=reply)

    def ask_about_scene(self, lesson_id: str, position: int, user_query: str) -> TutorTurn:
        """Ask the tutor with the context of a given scene filled in."""
        scene = self.store.get_scene(lesson_id, position)
        return self.ask_tutor(build_scene_context(scene), user_query)

    def has_lesson(self, lesson_id: str) -> bool:
        try:
            self.store.get_lesson(lesson_id)
        except LessonNotFoundError:
            return False
        return True
