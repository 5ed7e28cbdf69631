#!/usr/bin/env python3
"""
Tutor Bridge Module

Answers open-ended "ask Sensei" questions with the external language model:
- Fills the Sensei prompt with the story context and the learner's question
- Makes exactly one completion call, no retry, no cache, no memory
- Turns every failure into a fixed reply so the lesson never breaks
"""

import asyncio
import logging
from typing import Optional

from . import config
from .completion_service import CompletionResult, CompletionService
from .models import TutorState
from .prompts_template import get_tutor_prompt

logger = logging.getLogger(__name__)

# The two fallbacks stay textually different so logs and clients can tell a
# dead connection from an empty answer.
CONNECTION_FAILED_REPLY = "Maaf, koneksi otak saya sedang terputus. Coba lagi nanti ya!"
NO_ANSWER_REPLY = "Hmm, saya tidak tahu harus jawab apa."


class TutorBridge:
    """Stateless bridge between a learner question and the completion service"""

    def __init__(self, completion_service: CompletionService, timeout_seconds: Optional[float] = None):
        """
        Args:
            completion_service: Anything with generate/agenerate returning a CompletionResult
            timeout_seconds: Upper bound for one async call (defaults to config)
        """
        self.completion_service = completion_service
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else config.TUTOR_TIMEOUT_SECONDS

    def ask(self, context_info: str, user_query: str) -> str:
        """
        Get Sensei's reply to a learner question. Never raises.

        Args:
            context_info: Description of the scene the learner is on
            user_query: The learner's question, verbatim

        Returns:
            str: model reply, CONNECTION_FAILED_REPLY or NO_ANSWER_REPLY
        """
        prompt = get_tutor_prompt(context_info, user_query)
        logger.debug("Tutor %s", TutorState.AWAITING_RESPONSE.value)
        try:
            result = self.completion_service.generate(prompt)
        except Exception as e:
            logger.error("Gemini completion failed: %s", e)
            return CONNECTION_FAILED_REPLY
        finally:
            logger.debug("Tutor %s", TutorState.IDLE.value)
        return self._extract_reply(result)

    async def aask(self, context_info: str, user_query: str) -> str:
        """Async variant of ask, cancelled after timeout_seconds."""
        prompt = get_tutor_prompt(context_info, user_query)
        logger.debug("Tutor %s", TutorState.AWAITING_RESPONSE.value)
        try:
            result = await asyncio.wait_for(self.completion_service.agenerate(prompt), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error("Gemini completion timed out after %.1fs", self.timeout_seconds)
            return CONNECTION_FAILED_REPLY
        except Exception as e:
            logger.error("Gemini completion failed: %s", e)
            return CONNECTION_FAILED_REPLY
        finally:
            logger.debug("Tutor %s", TutorState.IDLE.value)
        return self._extract_reply(result)

    @staticmethod
    def _extract_reply(result: CompletionResult) -> str:
        text = result.first_text
        if text is None:
            logger.warning("Gemini returned no candidates or no content parts")
            return NO_ANSWER_REPLY
        return text
