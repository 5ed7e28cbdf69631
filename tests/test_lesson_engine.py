#!/usr/bin/env python3
"""
LessonEngine tests: orchestration, scene progression and tutor context
"""

import pytest

from sensei.choice_resolver import OptionIndexError
from sensei.lesson_engine import compose_reaction, next_position
from sensei.models import Verdict
from sensei.prompts_template import build_scene_context
from sensei.rule_evaluator import UNKNOWN_SCENE_VERDICT
from sensei.scene_store import LessonNotFoundError, SceneNotFoundError


def test_choose_returns_authored_option(engine):
    option = engine.choose("1", 0, 1)
    assert option.text == "Saya umur 12 tahun."
    assert option.is_correct is False


def test_choose_rejects_bad_index(engine):
    with pytest.raises(OptionIndexError):
        engine.choose("1", 0, 2)


def test_choose_rejects_unknown_scene_and_lesson(engine):
    with pytest.raises(SceneNotFoundError):
        engine.choose("1", 9, 0)
    with pytest.raises(LessonNotFoundError):
        engine.choose("99", 0, 0)


def test_check_text_uses_lesson_rules(engine):
    assert engine.check_text("1", 1, "Saya dari Jepang").is_correct is True
    assert engine.check_text("1", 3, "dua puluh").is_correct is False


def test_check_text_unknown_lesson_gets_degenerate_verdict(engine):
    assert engine.check_text("99", 1, "Jepang") == UNKNOWN_SCENE_VERDICT


def test_scripted_answers_never_reach_the_tutor(engine, fake_service):
    engine.choose("1", 0, 0)
    engine.check_text("1", 1, "Jepang")
    assert fake_service.prompts == []


def test_ask_tutor_returns_turn(engine, fake_service):
    turn = engine.ask_tutor("Karakter: Sari", "Apa arti 'asal'?")

    assert turn.context == "Karakter: Sari"
    assert turn.user_query == "Apa arti 'asal'?"
    assert turn.reply == "Jawaban Sensei"
    assert len(fake_service.prompts) == 1


def test_ask_about_scene_sends_scene_context(engine, fake_service):
    engine.ask_about_scene("1", 0, "Kenapa 'nama saya'?")

    prompt = fake_service.prompts[0]
    assert "Karakter: Sari" in prompt
    assert "Siapa namamu?" in prompt
    assert "Jawaban Benar: Nama saya Wira." in prompt


def test_scene_context_for_text_scene_has_no_expected_answer(store):
    context = build_scene_context(store.get_scene("1", 1))
    assert "Mood: Muka_sari_senang.png" in context
    assert "Jawaban Benar" not in context


def test_next_position(store):
    lesson = store.get_lesson("1")
    assert next_position(lesson, 0, True) == 1
    assert next_position(lesson, 3, False) == 3
    assert next_position(lesson, 4, False) == 4
    assert next_position(lesson, 4, True) is None


def test_compose_reaction():
    verdict = Verdict(is_correct=False, reaction="Eh rendang?", feedback="Itu makanan.")
    assert compose_reaction(verdict) == "Eh rendang?\n\n(🇯🇵 Sensei: Itu makanan.)"


def test_has_lesson(engine):
    assert engine.has_lesson("1") is True
    assert engine.has_lesson("2") is False
