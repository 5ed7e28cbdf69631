#!/usr/bin/env python3
"""
Content Loader Module

Builds the immutable lesson script from the JSON files bundled in
sensei/content/lessons:
- Scenes and options, in authored order
- Per-scene free-text rule sets (the RuleBook)
- Load-time validation of the script invariants
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from . import config
from .models import EvaluationRule, InputMode, Lesson, Option, RuleBook, Scene, Verdict

logger = logging.getLogger(__name__)


def _scene_from_dict(position: int, raw: Dict[str, Any]) -> Scene:
    """Build a scene; its position is its index in the authored list."""
    options = tuple(Option.model_validate(item) for item in raw.get("options") or [])
    return Scene(
        position=position,
        input_type=InputMode(raw["inputType"]),
        character_name=str(raw["characterName"]),
        character_mood=str(raw.get("characterMood", "")),
        dialogue=str(raw["dialogue"]),
        options=options,
    )


def _rule_from_dict(raw: Dict[str, Any]) -> EvaluationRule:
    literals = tuple(str(value).lower() for value in raw.get("contains") or [] if str(value))
    return EvaluationRule(contains=literals, verdict=Verdict.model_validate(raw["verdict"]))


def _lesson_from_dict(raw: Dict[str, Any]) -> Tuple[Lesson, RuleBook]:
    """
    Build a lesson and its rule book from one raw JSON document.

    Args:
        raw: Parsed lesson document with "id", "title", "scenes" and "rules"

    Returns:
        Tuple[Lesson, RuleBook]: the script and the free-text rules bound to it

    Raises:
        ValueError: if the document is malformed or breaks a script invariant
    """
    try:
        lesson_id = str(raw["id"])
        scenes = tuple(_scene_from_dict(position, item) for position, item in enumerate(raw.get("scenes", [])))
        lesson = Lesson(id=lesson_id, title=str(raw["title"]), scenes=scenes)

        rule_sets = {}
        for key, items in (raw.get("rules") or {}).items():
            position = int(key)
            if position in rule_sets:
                raise ValueError(f"Lesson '{lesson_id}' binds scene {position} twice.")
            rule_sets[position] = tuple(_rule_from_dict(item) for item in items)
        rulebook = RuleBook(lesson_id=lesson_id, rule_sets=rule_sets)
    except (KeyError, TypeError, ValidationError) as e:
        raise ValueError(f"Malformed lesson content: {e}") from e

    validate_lesson(lesson, rulebook)
    return lesson, rulebook


def validate_lesson(lesson: Lesson, rulebook: RuleBook) -> None:
    """Check that every scene can always be answered."""
    if not lesson.scenes:
        raise ValueError(f"Lesson '{lesson.id}' has no scenes.")

    for scene in lesson.scenes:
        if scene.input_type == InputMode.CHOICE:
            if not scene.options:
                raise ValueError(f"Choice scene {scene.position} of lesson '{lesson.id}' has no options.")
            continue

        if scene.options:
            raise ValueError(f"Text scene {scene.position} of lesson '{lesson.id}' must not carry options.")
        rules = rulebook.rules_for(scene.position)
        if not rules:
            raise ValueError(f"Text scene {scene.position} of lesson '{lesson.id}' has no evaluation rules.")
        if not rules[-1].is_catch_all:
            raise ValueError(f"Rules for scene {scene.position} of lesson '{lesson.id}' must end with a catch-all.")
        if any(rule.is_catch_all for rule in rules[:-1]):
            raise ValueError(f"Rules for scene {scene.position} of lesson '{lesson.id}' have a catch-all before the end.")

    for position in rulebook.rule_sets:
        if position < 0 or position >= len(lesson.scenes):
            raise ValueError(f"Lesson '{lesson.id}' has rules for unknown scene {position}.")
        if lesson.scenes[position].input_type != InputMode.FREE_TEXT:
            raise ValueError(f"Lesson '{lesson.id}' has rules for choice scene {position}.")


def _register(lessons: Dict[str, Tuple[Lesson, RuleBook]], raw: Dict[str, Any]) -> None:
    lesson, rulebook = _lesson_from_dict(raw)
    if lesson.id in lessons:
        raise ValueError(f"Duplicate lesson id: {lesson.id}")
    lessons[lesson.id] = (lesson, rulebook)


def load_lessons() -> Dict[str, Tuple[Lesson, RuleBook]]:
    """Load the bundled lessons."""
    lessons: Dict[str, Tuple[Lesson, RuleBook]] = {}
    entries = sorted(resources.files(config.CONTENT_PACKAGE).iterdir(), key=lambda entry: entry.name)
    for entry in entries:
        if entry.name.endswith(".json"):
            _register(lessons, json.loads(entry.read_text(encoding="utf-8-sig")))
    logger.debug("Loaded %d bundled lesson(s)", len(lessons))
    return lessons


def load_lessons_from_dir(path: Path) -> Dict[str, Tuple[Lesson, RuleBook]]:
    """Load lessons from a directory, for tests and authoring tools."""
    lessons: Dict[str, Tuple[Lesson, RuleBook]] = {}
    for file_path in sorted(Path(path).glob("*.json")):
        _register(lessons, json.loads(file_path.read_text(encoding="utf-8-sig")))
    logger.debug("Loaded %d lesson(s) from %s", len(lessons), path)
    return lessons
