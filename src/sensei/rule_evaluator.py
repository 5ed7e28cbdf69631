#!/usr/bin/env python3
"""
Rule Evaluator Module

Deterministic evaluation of free-text answers:
- Lowercase normalization
- Ordered substring rules per scene, first match wins
- Catch-all verdict when nothing matches

Matching is deliberately loose ("sabun" anywhere in the answer triggers the
soap reaction). Rule order decides which reaction wins when an answer hits
several rules, so rule sets must be kept in authored order.
"""

from typing import Optional

from .models import RuleBook, Verdict

UNKNOWN_SCENE_VERDICT = Verdict(is_correct=False, reaction="...", feedback="Error logic")


def normalize_answer(raw_answer: str) -> str:
    return raw_answer.lower()


class RuleEvaluator:
    """Evaluates free-text answers against one lesson's rule book"""

    def __init__(self, rulebook: Optional[RuleBook] = None):
        self.rulebook = rulebook or RuleBook(lesson_id="")

    def evaluate(self, scene_position: int, raw_answer: str) -> Verdict:
        """
        Evaluate a learner answer for the scene at scene_position.

        Args:
            scene_position: 0-based scene index inside the lesson
            raw_answer: Text exactly as the learner typed it

        Returns:
            Verdict: always; scenes without rules get UNKNOWN_SCENE_VERDICT
        """
        rules = self.rulebook.rules_for(scene_position)
        if not rules:
            return UNKNOWN_SCENE_VERDICT

        answer = normalize_answer(raw_answer)
        for rule in rules:
            if rule.matches(answer):
                return rule.verdict

        # unreachable for validated content: the last rule is a catch-all
        return UNKNOWN_SCENE_VERDICT
