#!/usr/bin/env python3
"""
Gradio Lesson Player

Visual-novel style front end for the lesson engine:
- Sari's dialogue and expression for the current scene
- Answer buttons (choice scenes) or a text box (text scenes)
- Reaction, then Continue on a right answer or Try Again on a wrong one
- "Ask Sensei" chat that sends the current scene as context

Each browser tab keeps its own position in gr.State; nothing is stored
server side.
"""

from typing import Any, Dict, List, Optional

import gradio as gr

from sensei.dashboard import get_dashboard_state
from sensei.i18n import SUPPORTED_LANGUAGES, get_ui_text
from sensei.lesson_engine import LessonEngine, compose_reaction, next_position
from sensei.models import InputMode
from sensei.prompts_template import build_scene_context


def new_player_state() -> Dict[str, Any]:
    return {"lesson_id": None, "position": 0, "answered": False, "last_correct": False, "mood": ""}


def format_home(lang: str = "en") -> str:
    """Streak, XP and module list of the dashboard snapshot as markdown."""
    state = get_dashboard_state()
    lines = [
        f"**{state.profile.display_name}** ({state.profile.username}) · Level {state.profile.level}",
        f"{get_ui_text('streak_label', lang).format(days=state.streak_days)} · "
        f"{get_ui_text('xp_label', lang).format(xp=state.xp)}",
        "",
    ]
    for module in state.modules:
        mark = "✅" if module.done else "▶️"
        lines.append(f"- {module.icon} {module.title} {mark}")
    return "\n".join(lines)


def _idle_outputs(state: Dict[str, Any], message: str) -> tuple:
    return (
        state,
        "",
        message,
        gr.update(choices=[], value=None, visible=False),
        gr.update(value="", visible=False),
        gr.update(visible=False),
        gr.update(visible=False),
    )


def _scene_outputs(engine: LessonEngine, state: Dict[str, Any], lang: str, dialogue: Optional[str] = None) -> tuple:
    """Outputs for [state, character, dialogue, choices, text box, submit, next]."""
    scene = engine.store.get_scene(state["lesson_id"], state["position"])
    is_choice = scene.input_type == InputMode.CHOICE
    answered = state["answered"]
    mood = state["mood"] or scene.character_mood
    next_label = get_ui_text("continue_btn" if state["last_correct"] else "retry_btn", lang)

    return (
        state,
        f"### {scene.character_name}\n`{mood}`",
        dialogue if dialogue is not None else scene.dialogue,
        gr.update(
            choices=[(option.text, index) for index, option in enumerate(scene.options)],
            value=None,
            label=get_ui_text("choice_label", lang),
            visible=is_choice and not answered,
            interactive=True,
        ),
        gr.update(value="", label=get_ui_text("text_answer_label", lang), visible=not is_choice and not answered),
        gr.update(value=get_ui_text("submit_btn", lang), visible=not answered),
        gr.update(value=next_label, visible=answered),
    )


def start_lesson(engine: LessonEngine, lesson_id: str, lang: str = "en") -> tuple:
    state = new_player_state()
    if not lesson_id or not engine.has_lesson(lesson_id):
        return _idle_outputs(state, get_ui_text("no_lesson_loaded", lang))
    state["lesson_id"] = lesson_id
    return _scene_outputs(engine, state, lang)


def _after_answer(engine: LessonEngine, state: Dict[str, Any], is_correct: bool, reaction: str,
                  reaction_image: Optional[str], lang: str) -> tuple:
    state = dict(state, answered=True, last_correct=is_correct, mood=reaction_image or "")
    return _scene_outputs(engine, state, lang, dialogue=reaction)


def submit_choice(engine: LessonEngine, state: Dict[str, Any], option_index: Optional[int], lang: str = "en") -> tuple:
    if not state.get("lesson_id"):
        return _idle_outputs(state, get_ui_text("no_lesson_loaded", lang))
    if option_index is None:
        return _scene_outputs(engine, state, lang, dialogue=get_ui_text("pick_an_option", lang))
    option = engine.choose(state["lesson_id"], state["position"], int(option_index))
    return _after_answer(engine, state, option.is_correct, option.reaction, option.reaction_image, lang)


def submit_text(engine: LessonEngine, state: Dict[str, Any], answer: str, lang: str = "en") -> tuple:
    if not state.get("lesson_id"):
        return _idle_outputs(state, get_ui_text("no_lesson_loaded", lang))
    answer = (answer or "").strip()
    if not answer:
        return _scene_outputs(engine, state, lang, dialogue=get_ui_text("empty_answer", lang))
    verdict = engine.check_text(state["lesson_id"], state["position"], answer)
    return _after_answer(engine, state, verdict.is_correct, compose_reaction(verdict), verdict.reaction_image, lang)


def advance(engine: LessonEngine, state: Dict[str, Any], lang: str = "en") -> tuple:
    """Continue after a right answer, replay the scene after a wrong one."""
    if not state.get("lesson_id"):
        return _idle_outputs(state, get_ui_text("no_lesson_loaded", lang))
    lesson = engine.get_lesson(state["lesson_id"])
    position = next_position(lesson, state["position"], state["last_correct"])
    if position is None:
        return _idle_outputs(new_player_state(), get_ui_text("lesson_complete", lang))
    state = dict(new_player_state(), lesson_id=state["lesson_id"], position=position)
    return _scene_outputs(engine, state, lang)


def ask_sensei(engine: LessonEngine, state: Dict[str, Any], question: str, history: List[dict]) -> tuple:
    """Append the learner question and Sensei's reply to the chat history."""
    question = (question or "").strip()
    history = list(history or [])
    if not question:
        return history, ""

    context = ""
    if state.get("lesson_id"):
        context = build_scene_context(engine.store.get_scene(state["lesson_id"], state["position"]))
    turn = engine.ask_tutor(context, question)

    history.append({"role": "user", "content": question})
    history.append({"role": "assistant", "content": turn.reply})
    return history, ""


def create_lesson_interface(engine: LessonEngine) -> gr.Blocks:
    """Build the Gradio Blocks app around one LessonEngine."""
    lesson_choices = [(engine.get_lesson(lesson_id).title, lesson_id) for lesson_id in engine.store.lesson_ids()]
    default_lesson = lesson_choices[0][1] if lesson_choices else None

    with gr.Blocks(title=get_ui_text("app_title", "en")) as interface:
        language_state = gr.State(value="en")
        player_state = gr.State(value=new_player_state())

        app_title = gr.Markdown(f"# {get_ui_text('app_title', 'en')}")
        app_header = gr.Markdown(get_ui_text("app_header", "en"))

        with gr.Row():
            with gr.Column(scale=1):
                language_dropdown = gr.Dropdown(
                    choices=[(name, code) for code, name in SUPPORTED_LANGUAGES.items()],
                    value="en",
                    label=get_ui_text("language_label", "en"),
                    interactive=True,
                )
                home_md = gr.Markdown(format_home("en"))
                lesson_dropdown = gr.Dropdown(
                    choices=lesson_choices,
                    value=default_lesson,
                    label=get_ui_text("lesson_picker_label", "en"),
                )
                start_btn = gr.Button(get_ui_text("start_lesson_btn", "en"), variant="primary")

            with gr.Column(scale=2):
                character_md = gr.Markdown("")
                dialogue_box = gr.Textbox(show_label=False, interactive=False, lines=5,
                                          value=get_ui_text("no_lesson_loaded", "en"))
                choice_radio = gr.Radio(choices=[], visible=False, label=get_ui_text("choice_label", "en"))
                text_answer = gr.Textbox(visible=False, label=get_ui_text("text_answer_label", "en"),
                                         placeholder=get_ui_text("text_answer_placeholder", "en"))
                submit_btn = gr.Button(get_ui_text("submit_btn", "en"), variant="primary", visible=False)
                next_btn = gr.Button(get_ui_text("continue_btn", "en"), visible=False)

            with gr.Column(scale=2):
                tutor_header = gr.Markdown(f"### {get_ui_text('tutor_header', 'en')}")
                chatbot = gr.Chatbot(height=400, show_label=False, type="messages")
                with gr.Row():
                    tutor_input = gr.Textbox(
                        label=get_ui_text("tutor_input_label", "en"),
                        placeholder=get_ui_text("tutor_input_placeholder", "en"),
                        lines=2,
                        scale=4,
                    )
                    tutor_send_btn = gr.Button(get_ui_text("tutor_send_btn", "en"), variant="primary", scale=1)

        scene_outputs = [player_state, character_md, dialogue_box, choice_radio, text_answer, submit_btn, next_btn]

        def update_ui_language(lang):
            return {
                language_state: lang,
                app_title: gr.update(value=f"# {get_ui_text('app_title', lang)}"),
                app_header: gr.update(value=get_ui_text("app_header", lang)),
                language_dropdown: gr.update(label=get_ui_text("language_label", lang)),
                home_md: gr.update(value=format_home(lang)),
                lesson_dropdown: gr.update(label=get_ui_text("lesson_picker_label", lang)),
                start_btn: gr.update(value=get_ui_text("start_lesson_btn", lang)),
                text_answer: gr.update(placeholder=get_ui_text("text_answer_placeholder", lang)),
                tutor_header: gr.update(value=f"### {get_ui_text('tutor_header', lang)}"),
                tutor_input: gr.update(
                    label=get_ui_text("tutor_input_label", lang),
                    placeholder=get_ui_text("tutor_input_placeholder", lang),
                ),
                tutor_send_btn: gr.update(value=get_ui_text("tutor_send_btn", lang)),
            }

        language_dropdown.change(
            fn=update_ui_language,
            inputs=[language_dropdown],
            outputs=[language_state, app_title, app_header, language_dropdown, home_md, lesson_dropdown,
                     start_btn, text_answer, tutor_header, tutor_input, tutor_send_btn],
        )

        start_btn.click(
            fn=lambda lesson_id, lang: start_lesson(engine, lesson_id, lang),
            inputs=[lesson_dropdown, language_state],
            outputs=scene_outputs,
        )

        def handle_submit(state, option_index, answer, lang):
            if not state.get("lesson_id"):
                return _idle_outputs(state, get_ui_text("no_lesson_loaded", lang))
            scene = engine.store.get_scene(state["lesson_id"], state["position"])
            if scene.input_type == InputMode.CHOICE:
                return submit_choice(engine, state, option_index, lang)
            return submit_text(engine, state, answer, lang)

        submit_btn.click(
            fn=handle_submit,
            inputs=[player_state, choice_radio, text_answer, language_state],
            outputs=scene_outputs,
        )
        text_answer.submit(
            fn=handle_submit,
            inputs=[player_state, choice_radio, text_answer, language_state],
            outputs=scene_outputs,
        )

        next_btn.click(
            fn=lambda state, lang: advance(engine, state, lang),
            inputs=[player_state, language_state],
            outputs=scene_outputs,
        )

        tutor_send_btn.click(
            fn=lambda state, question, history: ask_sensei(engine, state, question, history),
            inputs=[player_state, tutor_input, chatbot],
            outputs=[chatbot, tutor_input],
        )
        tutor_input.submit(
            fn=lambda state, question, history: ask_sensei(engine, state, question, history),
            inputs=[player_state, tutor_input, chatbot],
            outputs=[chatbot, tutor_input],
        )

    return interface
