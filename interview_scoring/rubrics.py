FILLER_WORDS = (
    "um", "uh", "like", "you know", "i mean",
    "sort of", "kind of", "actually", "basically", "literally",
)

TEXT_RUBRIC = {
    "filler_weight": 0.7,
    "structure_weight": 0.3,
    "filler_penalty_per_pct": 6,
    "filler_floor": 40,
}

# checked in this order; "ideal" is closed, "slow" is [90, 120), "fast" is (160, 190]
SPEECH_BANDS_WPM = {
    "ideal":     {"range": (120, 160), "score": 100},
    "slow":      {"range": (90, 120),  "score": 85},
    "fast":      {"range": (160, 190), "score": 80},
    "too_slow":  {"score": 60},
    "too_fast":  {"score": 50},
}

WEBCAM_BANDS = {
    "frozen":    {"below": 5,  "score": 80},
    "natural":   {"upto": 25,  "score": 95},
    "fidgeting": {"upto": 50,  "score": 70},
    "excessive": {"score": 50},
}

OVERALL_WEIGHTS = {
    "with_webcam":    {"text": 0.4, "speech": 0.3, "webcam": 0.3},
    "without_webcam": {"text": 0.6, "speech": 0.4},
}

BAND_THRESHOLDS = (
    (80, "strong"),
    (50, "fair"),
)

TOPICS = (
    "Data Structures", "Algorithms", "System Design", "Database Optimization",
    "Security", "Performance", "Testing", "Clean Code", "Scalability",
    "Microservices", "API Design", "Authentication", "State Management",
    "Cloud Computing", "CI/CD", "Debugging", "Networking", "Concurrency",
)

BASE_TOPIC_WEIGHT = 10
TOPIC_WEIGHT_PENALTY = 3
MIN_TOPIC_WEIGHT = 1
