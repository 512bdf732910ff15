from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from openai import OpenAI


def ensure_env_loaded() -> None:
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
    else:
        load_dotenv(override=False)


ensure_env_loaded()


@dataclass(frozen=True)
class Settings:
    primary_model: str
    fallback_model: str
    history_limit: int


settings = Settings(
    primary_model=os.getenv("PRIMARY_MODEL", "gpt-4o"),
    fallback_model=os.getenv("FALLBACK_MODEL", "gpt-4o-mini"),
    history_limit=int(os.getenv("HISTORY_LIMIT", "3")),
)


def mock_mode() -> bool:
    # read per call so tests can flip it with monkeypatch
    return os.getenv("MOCK_MODE", "0") == "1"


_client = None

def get_openai_client():
    global _client
    if _client is None:
        key = os.getenv("OPENAI_API_KEY")
        if not key and not mock_mode():
            raise RuntimeError("OPENAI_API_KEY not set; use .env or set MOCK_MODE=1")
        if not key:
            return None
        _client = OpenAI(api_key=key)
    return _client
