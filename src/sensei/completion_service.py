#!/usr/bin/env python3
"""
Completion Service Module

The external language model behind the tutor, seen as:
- one prompt string in
- zero or more candidates out, each with zero or more text parts

GeminiCompletionService talks to Gemini through the google-genai SDK and owns
the client lifecycle (open/close). Tests substitute any object with the same
generate/agenerate methods.
"""

import logging
from typing import List, Optional, Protocol

from google import genai
from google.genai import types
from pydantic import BaseModel, Field

from . import config

logger = logging.getLogger(__name__)


class Candidate(BaseModel):
    parts: List[str] = Field(default_factory=list, description="Text segments of one generated answer.")


class CompletionResult(BaseModel):
    candidates: List[Candidate] = Field(default_factory=list)

    @property
    def first_text(self) -> Optional[str]:
        """Text of the first part of the first candidate, or None when there is none."""
        if not self.candidates or not self.candidates[0].parts:
            return None
        return self.candidates[0].parts[0]

    @classmethod
    def from_gemini(cls, response: types.GenerateContentResponse) -> "CompletionResult":
        candidates = []
        for candidate in response.candidates or []:
            parts = []
            if candidate.content is not None:
                parts = [part.text for part in candidate.content.parts or [] if part.text is not None]
            candidates.append(Candidate(parts=parts))
        return cls(candidates=candidates)


class CompletionService(Protocol):
    def open(self) -> "CompletionService": ...

    def close(self) -> None: ...

    def generate(self, prompt: str) -> CompletionResult: ...

    async def agenerate(self, prompt: str) -> CompletionResult: ...


class GeminiCompletionService:
    """Gemini text completion with an explicit open/close lifecycle"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = config.GEMINI_MODEL_NAME,
        temperature: float = config.TUTOR_TEMPERATURE,
        timeout_seconds: float = config.TUTOR_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key if api_key is not None else config.get_api_key()
        self.model_name = model_name
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds
        self._client: Optional[genai.Client] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    def open(self) -> "GeminiCompletionService":
        if self._client is None:
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
            )
            logger.info("Gemini client ready (model=%s)", self.model_name)
        return self

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Gemini client closed")

    def __enter__(self) -> "GeminiCompletionService":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _require_client(self) -> genai.Client:
        if self._client is None:
            raise RuntimeError("GeminiCompletionService is not open")
        return self._client

    def _generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(temperature=self.temperature)

    def generate(self, prompt: str) -> CompletionResult:
        response = self._require_client().models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=self._generation_config(),
        )
        return CompletionResult.from_gemini(response)

    async def agenerate(self, prompt: str) -> CompletionResult:
        response = await self._require_client().aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=self._generation_config(),
        )
        return CompletionResult.from_gemini(response)
