import json, logging, time
from typing import Any, List

from .config import settings, mock_mode, get_openai_client

logger = logging.getLogger(__name__)

MOCK_RESPONSE = (
    "```json\n"
    "[{\"question\": \"How would you design a rate limiter for a public API?\", "
    "\"answer\": \"Token bucket per client key, shared state in Redis, 429 with Retry-After.\"}]\n"
    "```"
)


class GenerationError(RuntimeError):
    pass


def build_focus_instruction(focus_areas: List[str]) -> str:
    if not focus_areas:
        return ""
    bullets = "\n".join(f"- {topic}" for topic in focus_areas)
    return f"""
IMPORTANT: To ensure a diverse interview, prioritize questions related to these topics (do not limit yourself to them if the tech stack is broader):
{bullets}

Avoid standard, commonly asked questions where possible; focus on scenarios that fit the candidate's experience level.
"""


def _is_model_missing(err: Exception) -> bool:
    msg = str(err)
    return "404" in msg or "not found" in msg.lower()


def _complete(model: str, prompt: str, temperature: float) -> str:
    client = get_openai_client()
    resp = client.chat.completions.create(
        model=model, messages=[{"role": "user", "content": prompt}], temperature=temperature
    )
    return resp.choices[0].message.content


def generate_text(prompt: str, max_retries: int = 3, temperature: float = 0.7, sleep=time.sleep) -> str:
    if mock_mode():
        return MOCK_RESPONSE

    model = settings.primary_model
    attempts = 0
    while True:
        try:
            return _complete(model, prompt, temperature)
        except Exception as e:
            attempts += 1
            logger.warning("Attempt %d failed with model %s: %s", attempts, model, e)
            if _is_model_missing(e) and model != settings.fallback_model:
                logger.warning("Model %s not found, switching to %s", model, settings.fallback_model)
                model = settings.fallback_model
            if attempts >= max_retries:
                raise GenerationError(
                    f"Failed to generate content after {max_retries} attempts. Last error: {e}"
                ) from e
            sleep(2 ** attempts)


def clean_ai_response(raw: str) -> Any:
    txt = (raw or "").strip()
    txt = txt.replace("```json", "").replace("```", "").strip()
    try:
        return json.loads(txt)
    except json.JSONDecodeError:
        s = min((i for i in (txt.find("["), txt.find("{")) if i != -1), default=-1)
        e = max(txt.rfind("]"), txt.rfind("}"))
        if s == -1 or e <= s:
            raise ValueError("No JSON found in model response") from None
        return json.loads(txt[s:e+1])


def generate_questions(base_prompt: str, focus_areas: List[str]) -> List[dict]:
    prompt = base_prompt + build_focus_instruction(focus_areas)
    data = clean_ai_response(generate_text(prompt))
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of questions.")
    return [{"question": d.get("question", ""), "answer": d.get("answer", "")} for d in data if isinstance(d, dict)]
