import asyncio
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sensei.completion_service import Candidate, CompletionResult  # noqa: E402
from sensei.lesson_engine import LessonEngine  # noqa: E402
from sensei.scene_store import SceneGraphStore  # noqa: E402


class FakeCompletionService:
    """Stands in for Gemini: records prompts and returns a canned result or raises."""

    def __init__(self, result=None, error=None, delay=0.0):
        self.result = result if result is not None else CompletionResult(candidates=[Candidate(parts=["Jawaban Sensei"])])
        self.error = error
        self.delay = delay
        self.prompts = []
        self.opened = False
        self.closed = False

    def open(self):
        self.opened = True
        return self

    def close(self):
        self.closed = True

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.result

    async def agenerate(self, prompt):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_service_factory():
    return FakeCompletionService


@pytest.fixture
def fake_service():
    return FakeCompletionService()


@pytest.fixture(scope="session")
def store():
    return SceneGraphStore()


@pytest.fixture
def engine(fake_service, store):
    return LessonEngine(fake_service, store=store)
