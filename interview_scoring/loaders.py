import json, logging, re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Protocol

from .config import settings

logger = logging.getLogger(__name__)


def relax_load_json(path) -> Any:
    txt = open(path, "r", encoding="utf-8").read()
    txt = re.sub(r",\s*([\]\}])", r"\1", txt)
    return json.loads(txt)


class InterviewStore(Protocol):
    def recent_interviews(self, candidate_id: str, limit: int) -> List[Dict[str, Any]]:
        ...


def _created_at(doc: Dict[str, Any]) -> float:
    # epoch seconds, an exported Firestore timestamp, or an ISO string
    v = doc.get("createdAt")
    if isinstance(v, (int, float)):
        return float(v)
    if isinstance(v, dict):
        return float(v.get("seconds", v.get("_seconds", 0)))
    if isinstance(v, str):
        try:
            return datetime.fromisoformat(v.replace("Z", "+00:00")).timestamp()
        except ValueError:
            return 0.0
    return 0.0


class JsonInterviewStore:
    """One ``<candidate_id>.json`` file per candidate with an ``interviews`` list."""

    def __init__(self, root):
        self.root = Path(root)

    def recent_interviews(self, candidate_id: str, limit: int) -> List[Dict[str, Any]]:
        path = self.root / f"{candidate_id}.json"
        if not path.exists():
            return []
        data = relax_load_json(path)
        interviews = data.get("interviews", []) if isinstance(data, dict) else []
        interviews = sorted(interviews, key=_created_at, reverse=True)
        return interviews[:limit]


def flatten_question_texts(interviews: List[Dict[str, Any]]) -> List[str]:
    out = []
    for doc in interviews:
        questions = doc.get("questions")
        if not isinstance(questions, list):
            continue
        for q in questions:
            if isinstance(q, dict) and q.get("question"):
                out.append(q["question"])
    return out


def get_previous_question_texts(store: InterviewStore, candidate_id: str) -> List[str]:
    if not candidate_id:
        return []
    try:
        interviews = store.recent_interviews(candidate_id, settings.history_limit)
    except Exception as e:
        logger.warning("Error fetching previous questions for %s: %s", candidate_id, e)
        return []
    return flatten_question_texts(interviews)


def normalize_answers_block(data: dict) -> List[dict]:
    if "answers" not in data or not isinstance(data["answers"], list):
        raise ValueError("Top-level 'answers' list not found.")
    out = []
    for i, d in enumerate(data["answers"], 1):
        out.append({
            "id": d.get("id", f"a{i}"),
            "question": d.get("question", ""),
            "user_ans": d.get("user_ans", ""),
            "rating": d.get("rating"),
            "recording_duration_seconds": float(d.get("recording_duration_seconds") or 0),
            "webcam_instability": float(d.get("webcam_instability") or 0),
            "webcam_active": bool(d.get("webcam_active", False)),
        })
    return out
