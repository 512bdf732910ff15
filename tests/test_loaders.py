import json

import pytest

from interview_scoring.loaders import (
    JsonInterviewStore, get_previous_question_texts, normalize_answers_block, relax_load_json,
)


def _write_store(tmp_path):
    interviews = [
        {"createdAt": "2026-01-01T10:00:00Z", "questions": [{"question": "Oldest?", "answer": ""}]},
        {"createdAt": "2026-03-01T10:00:00Z", "questions": [{"question": "Explain CI/CD.", "answer": ""}]},
        {"createdAt": "2026-02-01T10:00:00Z", "questions": [{"question": "Scale a DB?", "answer": ""}]},
        {"createdAt": "2026-04-01T10:00:00Z", "questions": [{"question": "Debugging story?", "answer": ""},
                                                             {"question": "Security basics?", "answer": ""}]},
    ]
    (tmp_path / "u1.json").write_text(json.dumps({"interviews": interviews}))


def test_recent_questions_limited_to_three_interviews(tmp_path):
    _write_store(tmp_path)
    texts = get_previous_question_texts(JsonInterviewStore(tmp_path), "u1")
    assert texts == ["Debugging story?", "Security basics?", "Explain CI/CD.", "Scale a DB?"]


def test_unknown_or_empty_candidate(tmp_path):
    store = JsonInterviewStore(tmp_path)
    assert get_previous_question_texts(store, "nobody") == []
    assert get_previous_question_texts(store, "") == []


def test_store_failure_means_no_history():
    class Broken:
        def recent_interviews(self, candidate_id, limit):
            raise RuntimeError("boom")

    assert get_previous_question_texts(Broken(), "u1") == []


def test_relax_load_json_trailing_commas(tmp_path):
    p = tmp_path / "s.json"
    p.write_text('{"answers": [{"user_ans": "hi",},],}')
    assert relax_load_json(p) == {"answers": [{"user_ans": "hi"}]}


def test_normalize_answers_block():
    items = normalize_answers_block({"answers": [{"question": "Q?", "user_ans": "A", "webcam_active": True}]})
    assert items[0]["id"] == "a1"
    assert items[0]["recording_duration_seconds"] == 0.0
    assert items[0]["webcam_active"] is True
    with pytest.raises(ValueError):
        normalize_answers_block({"questions": []})
