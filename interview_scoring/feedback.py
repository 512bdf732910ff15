from .confidence import ConfidenceBreakdown, confidence_band

SIGNAL_LABELS = (
    ("text_score", "Answer Quality"),
    ("speech_score", "Speech Pace"),
    ("webcam_score", "Visual Presence"),
)


def build_confidence_card(breakdown: ConfidenceBreakdown) -> dict:
    signals = []
    for field, label in SIGNAL_LABELS:
        score = getattr(breakdown, field)
        signals.append({"label": label, "score": score, "band": confidence_band(score)})
    return {
        "overall": {"score": breakdown.overall, "band": confidence_band(breakdown.overall)},
        "signals": signals,
    }


def format_rating(ratings) -> str:
    # mean of 0-10 ratings, one decimal, as the feedback page shows it
    nums = [r for r in ratings if isinstance(r, (int, float))]
    if not nums:
        return "0.0"
    return f"{sum(nums) / len(nums):.1f}"
