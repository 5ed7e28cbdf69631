#!/usr/bin/env python3
"""
Scene Graph Store

Read-only access to the authored lessons. Built once at startup; there is no
mutation API, so concurrent readers need no synchronization.
"""

from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from .content_loader import load_lessons
from .models import Lesson, RuleBook, Scene


class LessonNotFoundError(KeyError):
    """Raised when a lesson id is not part of the loaded content."""


class SceneNotFoundError(IndexError):
    """Raised when a scene position is outside a lesson."""


class SceneGraphStore:
    """Holds every lesson and its rule book, keyed by lesson id"""

    def __init__(self, lessons: Optional[Dict[str, Tuple[Lesson, RuleBook]]] = None):
        """
        Args:
            lessons: Pre-loaded content. If None, the bundled lessons are loaded.
        """
        if lessons is None:
            lessons = load_lessons()
        self._lessons = MappingProxyType({lesson_id: lesson for lesson_id, (lesson, _) in lessons.items()})
        self._rulebooks = MappingProxyType({lesson_id: rulebook for lesson_id, (_, rulebook) in lessons.items()})

    def lesson_ids(self) -> List[str]:
        return list(self._lessons)

    def get_lesson(self, lesson_id: str) -> Lesson:
        try:
            return self._lessons[lesson_id]
        except KeyError:
            raise LessonNotFoundError(lesson_id) from None

    def get_scene(self, lesson_id: str, position: int) -> Scene:
        lesson = self.get_lesson(lesson_id)
        if position < 0 or position >= len(lesson.scenes):
            raise SceneNotFoundError(f"Lesson '{lesson_id}' has no scene {position}")
        return lesson.scenes[position]

    def get_rulebook(self, lesson_id: str) -> RuleBook:
        try:
            return self._rulebooks[lesson_id]
        except KeyError:
            raise LessonNotFoundError(lesson_id) from None
