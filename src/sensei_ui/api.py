#!/usr/bin/env python3
"""
HTTP API for the lesson frontend

Routes:
- GET  /api/state             dashboard snapshot
- GET  /api/lesson/{id}       lesson script
- POST /api/check-text        evaluate a typed answer
- POST /api/choose            resolve a button answer
- POST /api/ask-tutor         ask Sensei
- GET  /health
The Gradio player is mounted at /app and the static web folder at /.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import gradio as gr
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sensei import config
from sensei.choice_resolver import OptionIndexError
from sensei.completion_service import GeminiCompletionService
from sensei.dashboard import get_dashboard_state
from sensei.lesson_engine import LessonEngine
from sensei.models import (
    ChatRequest,
    ChatResponse,
    ChoiceRequest,
    DashboardState,
    Lesson,
    Option,
    TextAnswerRequest,
    Verdict,
)
from sensei.scene_store import LessonNotFoundError, SceneNotFoundError

from .gradio_ui import create_lesson_interface

logger = logging.getLogger(__name__)


def create_app(engine: Optional[LessonEngine] = None, mount_ui: bool = True, web_dir: Optional[str] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        engine: Lesson engine to serve. If None, one backed by Gemini is created.
        mount_ui: Mount the Gradio player at /app
        web_dir: Static folder served at /. Defaults to config.WEB_DIR; skipped if missing.
    """
    if engine is None:
        engine = LessonEngine(GeminiCompletionService())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        completion_service = engine.tutor.completion_service
        try:
            completion_service.open()
        except Exception as e:
            # ask-tutor answers with the fallback while the service is closed
            logger.warning("Completion service unavailable: %s", e)

        yield

        completion_service.close()

    app = FastAPI(title="Sensei Dialogue Tutor", lifespan=lifespan)
    app.state.engine = engine
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check():
        return Response(status_code=200, content="OK")

    @app.get("/api/state", response_model=DashboardState)
    def get_state():
        return get_dashboard_state()

    @app.get("/api/lesson/{lesson_id}", response_model=Lesson, response_model_exclude_none=True)
    def get_lesson(lesson_id: str):
        try:
            return engine.get_lesson(lesson_id)
        except LessonNotFoundError:
            raise HTTPException(status_code=404, detail=f"Lesson '{lesson_id}' not found")

    @app.post("/api/check-text", response_model=Verdict, response_model_exclude_none=True)
    def check_text(req: TextAnswerRequest):
        return engine.check_text(req.lesson_id, req.scene_index, req.answer)

    @app.post("/api/choose", response_model=Option, response_model_exclude_none=True)
    def choose(req: ChoiceRequest):
        try:
            return engine.choose(req.lesson_id, req.scene_index, req.option_index)
        except OptionIndexError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except (LessonNotFoundError, SceneNotFoundError) as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.post("/api/ask-tutor", response_model=ChatResponse)
    async def ask_tutor(req: ChatRequest):
        turn = await engine.aask_tutor(req.context, req.user_query)
        return ChatResponse(reply=turn.reply)

    if mount_ui:
        app = gr.mount_gradio_app(app, create_lesson_interface(engine), path="/app")

    web_dir = web_dir or config.WEB_DIR
    if os.path.isdir(web_dir):
        app.mount("/", StaticFiles(directory=web_dir, html=True), name="web")
        logger.info("Web directory mounted: %s", web_dir)
    else:
        logger.info("Web directory not found: %s", web_dir)

    return app


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("🎌 Starting Sensei Dialogue Tutor...")

    if not config.get_api_key():
        print("⚠️ GEMINI_API_KEY is not set. Sensei will answer with the offline fallback.")

    app = create_app()
    print(f"Launching on 0.0.0.0:{config.PORT}")
    print(f"Lesson player available at http://localhost:{config.PORT}/app")

    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    main()
