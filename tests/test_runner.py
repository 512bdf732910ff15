import json
from interview_scoring.runner import run_scoring_pass

def test_run_scoring_pass(tmp_path, monkeypatch):
    monkeypatch.setenv("MOCK_MODE", "1")
    inp = tmp_path/"in.json"
    inp.write_text(json.dumps({"answers": [
        {"question": "LRU?", "user_ans": "I implemented um a cache using a, you know, least recently used eviction policy",
         "rating": 7, "recording_duration_seconds": 6, "webcam_instability": 10, "webcam_active": True},
        {"question": "Empty?", "user_ans": "", "rating": 2},
    ]}))
    outp = tmp_path/"out.json"
    res = run_scoring_pass(str(inp), str(outp))
    assert outp.exists()
    assert res["meta"]["total_answers"] == 2
    assert res["per_answer"][0]["confidenceScore"]["overall"] == 82
    assert res["per_answer"][1]["confidenceScore"]["overall"] == 0
    assert res["overall"]["confidence_mean"] == 41
    assert res["overall"]["confidence_band"] == "weak"
    assert res["overall"]["rating_out_of_10"] == "4.5"
    assert json.loads(outp.read_text())["per_answer"][0]["card"]["overall"]["band"] == "strong"
