# prompt_tracer/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from prompt_tracer.llm.openai_client import clean_api_key, looks_like_api_key

DEFAULT_MODELS = ("gpt-4o-mini", "gpt-3.5-turbo")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw.isdigit() else default


@dataclass(frozen=True)
class EngineConfig:
    remote_enabled: bool = True
    api_key: Optional[str] = None
    models: Tuple[str, ...] = DEFAULT_MODELS
    remote_timeout_seconds: float = 20.0
    temperature: float = 0.7
    max_tokens: int = 300
    # remote rewrites at least this similar (word cosine) count as unchanged;
    # above 1.0 only exact / whitespace-and-case duplicates are rejected
    near_duplicate_threshold: float = 0.98

    @property
    def has_usable_credential(self) -> bool:
        return looks_like_api_key(self.api_key)

    @property
    def remote_allowed(self) -> bool:
        return self.remote_enabled and self.has_usable_credential and bool(self.models)

    @staticmethod
    def disabled() -> "EngineConfig":
        return EngineConfig(remote_enabled=False)

    @staticmethod
    def load(env_path: Optional[str] = None) -> "EngineConfig":
        load_dotenv(dotenv_path=env_path)
        models = tuple(
            m.strip() for m in os.getenv("PROMPT_TRACER_MODELS", "").split(",") if m.strip()
        ) or DEFAULT_MODELS
        return EngineConfig(
            remote_enabled=_env_bool("PROMPT_TRACER_REMOTE_ENABLED", True),
            api_key=clean_api_key(os.getenv("OPENAI_API_KEY")) or None,
            models=models,
            remote_timeout_seconds=_env_float("PROMPT_TRACER_TIMEOUT", 20.0),
            temperature=_env_float("PROMPT_TRACER_TEMPERATURE", 0.7),
            max_tokens=_env_int("PROMPT_TRACER_MAX_TOKENS", 300),
            near_duplicate_threshold=_env_float("PROMPT_TRACER_NEAR_DUPLICATE", 0.98),
        )
