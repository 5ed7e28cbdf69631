#!/usr/bin/env python3
"""
Gradio lesson player handler tests

The handlers are plain functions returning
(state, character, dialogue, choices, text box, submit, next),
so they are exercised without launching a browser.
"""

import gradio as gr

from sensei.tutor_bridge import CONNECTION_FAILED_REPLY
from sensei.lesson_engine import LessonEngine
from sensei_ui.gradio_ui import (
    advance,
    ask_sensei,
    create_lesson_interface,
    format_home,
    new_player_state,
    start_lesson,
    submit_choice,
    submit_text,
)

STATE, CHARACTER, DIALOGUE, CHOICES, TEXT_BOX, SUBMIT, NEXT = range(7)


def test_start_lesson_shows_first_scene(engine):
    out = start_lesson(engine, "1")

    assert out[STATE]["lesson_id"] == "1"
    assert out[STATE]["position"] == 0
    assert "Siapa namamu?" in out[DIALOGUE]
    assert "Sari" in out[CHARACTER]
    assert out[CHOICES]["visible"] is True
    assert out[CHOICES]["choices"] == [("Nama saya Wira.", 0), ("Saya umur 12 tahun.", 1)]
    assert out[TEXT_BOX]["visible"] is False
    assert out[NEXT]["visible"] is False


def test_start_unknown_lesson_stays_idle(engine):
    out = start_lesson(engine, "99")
    assert out[STATE]["lesson_id"] is None
    assert out[DIALOGUE] == "Start a lesson first."


def test_wrong_choice_then_retry_stays_on_scene(engine):
    state = start_lesson(engine, "1")[STATE]

    out = submit_choice(engine, state, 1)
    assert out[DIALOGUE] == "Eh? Aku tanya nama lho, bukan umur."
    assert out[NEXT]["visible"] is True
    assert out[NEXT]["value"] == "Try Again"
    assert "Muka_sari_bingung.png" in out[CHARACTER]

    out = advance(engine, out[STATE])
    assert out[STATE]["position"] == 0
    assert out[STATE]["answered"] is False
    assert out[CHOICES]["visible"] is True


def test_right_choice_moves_to_text_scene(engine):
    state = start_lesson(engine, "1")[STATE]

    out = submit_choice(engine, state, 0)
    assert out[NEXT]["value"] == "Continue"

    out = advance(engine, out[STATE])
    assert out[STATE]["position"] == 1
    assert out[CHOICES]["visible"] is False
    assert out[TEXT_BOX]["visible"] is True


def test_submit_without_picking_an_option(engine):
    state = start_lesson(engine, "1")[STATE]
    out = submit_choice(engine, state, None)
    assert out[DIALOGUE] == "Pick one of the options first."
    assert out[STATE]["answered"] is False


def test_typed_answer_shows_reaction_and_sensei_feedback(engine):
    state = dict(new_player_state(), lesson_id="1", position=1)

    out = submit_text(engine, state, "Rendang")

    assert out[STATE]["last_correct"] is False
    assert out[DIALOGUE].startswith("Eh rendang?")
    assert "(🇯🇵 Sensei: Salah konteks." in out[DIALOGUE]


def test_empty_typed_answer_is_not_evaluated(engine):
    state = dict(new_player_state(), lesson_id="1", position=1)
    out = submit_text(engine, state, "   ")
    assert out[DIALOGUE] == "Type an answer first."
    assert out[STATE]["answered"] is False


def test_finishing_last_scene_completes_lesson(engine):
    state = dict(new_player_state(), lesson_id="1", position=4)

    out = submit_choice(engine, state, 0)
    out = advance(engine, out[STATE])

    assert out[DIALOGUE] == "🎉 Lesson Complete!"
    assert out[STATE]["lesson_id"] is None


def test_handlers_follow_language(engine):
    out = start_lesson(engine, "1", lang="id")
    assert out[SUBMIT]["value"] == "Jawab"


def test_ask_sensei_sends_scene_context(engine, fake_service):
    state = dict(new_player_state(), lesson_id="1", position=0)

    history, cleared = ask_sensei(engine, state, "Kenapa pakai saya?", [])

    assert cleared == ""
    assert history == [
        {"role": "user", "content": "Kenapa pakai saya?"},
        {"role": "assistant", "content": "Jawaban Sensei"},
    ]
    assert "Jawaban Benar: Nama saya Wira." in fake_service.prompts[0]


def test_ask_sensei_ignores_blank_question(engine, fake_service):
    history, _ = ask_sensei(engine, new_player_state(), "  ", [])
    assert history == []
    assert fake_service.prompts == []


def test_ask_sensei_shows_connection_fallback(fake_service_factory, store):
    engine = LessonEngine(fake_service_factory(error=TimeoutError()), store=store)
    history, _ = ask_sensei(engine, new_player_state(), "Halo?", [])
    assert history[-1]["content"] == CONNECTION_FAILED_REPLY


def test_format_home():
    home = format_home("en")
    assert "Wira" in home
    assert "5 days" in home
    assert "Numbers - Bali ✅" in home


def test_create_lesson_interface(engine):
    assert isinstance(create_lesson_interface(engine), gr.Blocks)
