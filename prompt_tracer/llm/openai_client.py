# prompt_tracer/llm/openai_client.py
from __future__ import annotations

import logging
from typing import Optional, Protocol

import openai
from openai import AsyncOpenAI

from prompt_tracer.optimizer.request import SYSTEM, build_rewrite_request
from prompt_tracer.scorer.local_score import Analysis

logger = logging.getLogger(__name__)


class LLMError(Exception):
    pass


class ModelUnavailableError(LLMError):
    """The requested model does not exist or this key cannot use it."""

    def __init__(self, model: str, message: str = ""):
        super().__init__(message or f"model unavailable: {model}")
        self.model = model


class InvalidCredentialError(LLMError):
    pass


UNAVAILABLE_CODES = {"model_not_found", "model_not_available"}


def clean_api_key(api_key: Optional[str]) -> str:
    """Guard against copy/paste mistakes like smart quotes or "Bearer ..."."""
    key = (api_key or "").strip()
    key = key.replace("“", "").replace("”", "").replace("‘", "").replace("’", "")
    key = key.strip("'\"")
    if key.lower().startswith("bearer "):
        key = key[7:].strip()
    return key


def looks_like_api_key(api_key: Optional[str]) -> bool:
    """Format-only check; the key is never verified against the service here."""
    key = clean_api_key(api_key)
    if not key.startswith("sk-") or len(key) <= 20:
        return False
    try:
        key.encode("ascii")
    except UnicodeEncodeError:
        return False
    return True


def _is_model_unavailable(err: openai.APIStatusError) -> bool:
    if isinstance(err, openai.NotFoundError):
        return True
    code = getattr(err, "code", None)
    if code in UNAVAILABLE_CODES:
        return True
    msg = str(err).lower()
    return "model_not_found" in msg or ("model" in msg and "does not exist" in msg)


class RemoteRewriter(Protocol):
    async def rewrite(self, original: str, analysis: Analysis, model: str) -> str:
        ...


class OpenAIRewriter:
    """
    Remote rewrite collaborator backed by the chat completions API.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 20.0,
        temperature: float = 0.7,
        max_tokens: int = 300,
        client: Optional[AsyncOpenAI] = None,
    ):
        if client is None:
            key = clean_api_key(api_key)
            if not looks_like_api_key(key):
                raise InvalidCredentialError("OpenAI API key missing or malformed.")
            # retries are driven by the model fallback policy, not the SDK
            client = AsyncOpenAI(api_key=key, timeout=timeout, max_retries=0)
        self.client = client
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def rewrite(self, original: str, analysis: Analysis, model: str) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": SYSTEM},
                    {"role": "user", "content": build_rewrite_request(original, analysis)},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as e:
            if _is_model_unavailable(e):
                raise ModelUnavailableError(model, str(e)) from e
            raise LLMError(str(e)) from e
        except openai.OpenAIError as e:
            raise LLMError(str(e)) from e

        if not resp.choices:
            raise LLMError("Empty response from OpenAI (no choices).")
        content = resp.choices[0].message.content or ""
        if not content.strip():
            raise LLMError("Empty response from OpenAI.")
        return content
