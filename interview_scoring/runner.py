import os, time, json
from typing import Dict, Any, List
from .loaders import relax_load_json, normalize_answers_block
from .confidence import AnswerMetrics, score_answer, confidence_band, round_half_up
from .config import mock_mode
from .feedback import build_confidence_card, format_rating

def run_scoring_pass(in_path: str, out_path: str) -> Dict[str, Any]:
    data = relax_load_json(in_path)
    items = normalize_answers_block(data)

    per_a: List[Dict[str, Any]] = []
    t0 = time.time()

    for idx, item in enumerate(items, 1):
        metrics = AnswerMetrics(
            text=item["user_ans"],
            recording_duration_seconds=item["recording_duration_seconds"],
            webcam_instability=item["webcam_instability"],
            webcam_active=item["webcam_active"],
        )
        breakdown = score_answer(metrics)
        per_a.append({
            "id": item["id"],
            "question": item["question"],
            "user_ans": item["user_ans"],
            "rating": item["rating"],
            "confidenceScore": breakdown.to_dict(),
            "card": build_confidence_card(breakdown),
        })

        print(f"Scored {idx}/{len(items)}")

    overall_nums = [x["confidenceScore"]["overall"] for x in per_a]
    mean_conf = round_half_up(sum(overall_nums) / len(overall_nums)) if overall_nums else None

    out = {
        "meta": {
            "mock_mode": mock_mode(),
            "elapsed_sec": round(time.time()-t0, 2),
            "total_answers": len(items),
            "source": os.path.basename(in_path),
        },
        "per_answer": per_a,
        "overall": {
            "confidence_mean": mean_conf,
            "confidence_band": confidence_band(mean_conf) if mean_conf is not None else None,
            "rating_out_of_10": format_rating(x["rating"] for x in per_a),
        },
    }
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(out, f, indent=2, ensure_ascii=False)
    return out
