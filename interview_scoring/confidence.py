"""
Answer confidence scoring.

Three independent sub-scores (text quality, speech rate, webcam stability),
each 0-100, combined into one overall score. The webcam score only counts
when the camera was on for the answer.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict

from .rubrics import (
    FILLER_WORDS, TEXT_RUBRIC, SPEECH_BANDS_WPM, WEBCAM_BANDS,
    OVERALL_WEIGHTS, BAND_THRESHOLDS,
)

_FILLER_PATTERNS = tuple(
    re.compile(r"\b" + re.escape(f) + r"\b") for f in FILLER_WORDS
)
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class AnswerMetrics:
    text: str
    recording_duration_seconds: float = 0.0
    webcam_instability: float = 0.0
    webcam_active: bool = False


@dataclass(frozen=True)
class ConfidenceBreakdown:
    overall: int
    text_score: int
    speech_score: int
    webcam_score: int

    def to_dict(self) -> Dict[str, int]:
        # field names as stored on the answer document
        return {
            "overall": self.overall,
            "textScore": self.text_score,
            "speechScore": self.speech_score,
            "webcamScore": self.webcam_score,
        }


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def word_count(text: str) -> int:
    # leading and trailing whitespace never adds a token
    return len((text or "").split())


def count_fillers(text: str) -> int:
    lower = (text or "").lower()
    return sum(len(p.findall(lower)) for p in _FILLER_PATTERNS)


def average_sentence_length(text: str) -> float:
    # a blank segment (e.g. after closing punctuation) still counts as one token
    segments = _SENTENCE_SPLIT.split(text or "")
    tokens = sum(max(len(s.split()), 1) for s in segments)
    return tokens / max(len(segments), 1)


def compute_text_score(text: str) -> int:
    """Score transcript quality from filler density and sentence length."""
    words = word_count(text)
    if words == 0:
        return 0

    density = count_fillers(text) / words * 100
    filler_score = 100 - density * TEXT_RUBRIC["filler_penalty_per_pct"]
    filler_score = max(TEXT_RUBRIC["filler_floor"], min(100, filler_score))

    avg_len = average_sentence_length(text)
    if 8 < avg_len < 25:
        structure_score = 100
    elif avg_len >= 25:
        structure_score = 90  # rambling
    else:
        structure_score = 60  # choppy

    return round_half_up(
        filler_score * TEXT_RUBRIC["filler_weight"]
        + structure_score * TEXT_RUBRIC["structure_weight"]
    )


def compute_speech_score(duration_seconds: float, words: int) -> int:
    """Score speaking rate; 120-160 wpm is ideal."""
    if duration_seconds <= 0 or words == 0:
        return 0

    wpm = words / duration_seconds * 60
    lo, hi = SPEECH_BANDS_WPM["ideal"]["range"]
    if lo <= wpm <= hi:
        return SPEECH_BANDS_WPM["ideal"]["score"]
    lo, hi = SPEECH_BANDS_WPM["slow"]["range"]
    if lo <= wpm < hi:
        return SPEECH_BANDS_WPM["slow"]["score"]
    lo, hi = SPEECH_BANDS_WPM["fast"]["range"]
    if lo < wpm <= hi:
        return SPEECH_BANDS_WPM["fast"]["score"]
    if wpm < SPEECH_BANDS_WPM["slow"]["range"][0]:
        return SPEECH_BANDS_WPM["too_slow"]["score"]
    return SPEECH_BANDS_WPM["too_fast"]["score"]


def compute_webcam_score(instability: float) -> int:
    # 0 means a frozen frame; some movement reads as natural
    if instability < WEBCAM_BANDS["frozen"]["below"]:
        return WEBCAM_BANDS["frozen"]["score"]
    if instability <= WEBCAM_BANDS["natural"]["upto"]:
        return WEBCAM_BANDS["natural"]["score"]
    if instability <= WEBCAM_BANDS["fidgeting"]["upto"]:
        return WEBCAM_BANDS["fidgeting"]["score"]
    return WEBCAM_BANDS["excessive"]["score"]


def compute_overall(text_score: int, speech_score: int, webcam_score: int,
                    webcam_active: bool) -> int:
    if webcam_active:
        w = OVERALL_WEIGHTS["with_webcam"]
        return round_half_up(
            text_score * w["text"] + speech_score * w["speech"] + webcam_score * w["webcam"]
        )
    w = OVERALL_WEIGHTS["without_webcam"]
    return round_half_up(text_score * w["text"] + speech_score * w["speech"])


def score_answer(metrics: AnswerMetrics) -> ConfidenceBreakdown:
    """Build the full breakdown stored alongside a saved answer."""
    text_score = compute_text_score(metrics.text)
    speech_score = compute_speech_score(
        metrics.recording_duration_seconds, word_count(metrics.text)
    )
    webcam_score = compute_webcam_score(metrics.webcam_instability)
    overall = compute_overall(text_score, speech_score, webcam_score, metrics.webcam_active)
    return ConfidenceBreakdown(
        overall=overall,
        text_score=text_score,
        speech_score=speech_score,
        webcam_score=webcam_score,
    )


def confidence_band(score: float) -> str:
    for threshold, label in BAND_THRESHOLDS:
        if score >= threshold:
            return label
    return "weak"
