from interview_scoring.confidence import (
    AnswerMetrics, compute_text_score, compute_speech_score, compute_webcam_score,
    compute_overall, score_answer, confidence_band, count_fillers, round_half_up,
    average_sentence_length,
)

E2E_ANSWER = "I implemented um a cache using a, you know, least recently used eviction policy"


def test_empty_text_scores_zero():
    assert compute_text_score("") == 0
    assert compute_text_score("   \n ") == 0


def test_filler_heavy_single_sentence():
    # 2 fillers in 14 words floors the filler score at 40
    assert count_fillers(E2E_ANSWER) == 2
    assert compute_text_score(E2E_ANSWER) == 58


def test_clean_answer_scores_full_marks():
    text = "I built a caching layer that cut our database load in half last quarter"
    assert compute_text_score(text) == 100


def test_closing_punctuation_counts_as_a_short_segment():
    # 14 tokens plus one for the blank tail averages 7.5
    text = "I built a caching layer that cut our database load in half last quarter."
    assert average_sentence_length(text) == 7.5
    assert compute_text_score(text) == 88
    two = ("We moved the billing jobs onto a queue last year. "
           "That change cut our nightly batch failures down to zero.")
    assert average_sentence_length(two) == 7
    assert compute_text_score(two) == 88


def test_sentence_length_bands():
    assert compute_text_score("Yes. No. Maybe.") == 88
    rambling = " ".join(["word"] * 30)
    assert compute_text_score(rambling) == 97


def test_fillers_match_whole_words_only():
    assert count_fillers("Um, I mean, it's likely fine") == 2
    assert count_fillers("Basically I LIKE it, like, literally") == 4


SPEECH_CASES = [
    (0, 100, 0),
    (-5, 100, 0),
    (60, 0, 0),
    (60, 140, 100),
    (60, 120, 100),
    (60, 160, 100),
    (60, 100, 85),
    (60, 170, 80),
    (60, 190, 80),
    (60, 89, 60),
    (60, 200, 50),
]


def test_speech_score_bands():
    for duration, words, expected in SPEECH_CASES:
        assert compute_speech_score(duration, words) == expected, (duration, words)


def test_webcam_score_bands():
    cases = [(0, 80), (4, 80), (5, 95), (25, 95), (26, 70), (50, 70), (51, 50)]
    for instability, expected in cases:
        assert compute_webcam_score(instability) == expected, instability


def test_overall_ignores_webcam_when_inactive():
    assert compute_overall(80, 80, 0, False) == compute_overall(80, 80, 100, False) == 80
    assert compute_overall(80, 80, 100, True) == 86


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(57.49) == 57


def test_score_answer_with_webcam():
    m = AnswerMetrics(text=E2E_ANSWER, recording_duration_seconds=6,
                      webcam_instability=10, webcam_active=True)
    b = score_answer(m)
    assert (b.text_score, b.speech_score, b.webcam_score) == (58, 100, 95)
    assert b.overall == 82


def test_score_answer_without_webcam_still_reports_webcam():
    m = AnswerMetrics(text=E2E_ANSWER, recording_duration_seconds=6,
                      webcam_instability=10, webcam_active=False)
    b = score_answer(m)
    assert b.overall == 75
    assert b.to_dict() == {"overall": 75, "textScore": 58, "speechScore": 100, "webcamScore": 95}


def test_confidence_band():
    assert confidence_band(80) == "strong"
    assert confidence_band(79) == "fair"
    assert confidence_band(50) == "fair"
    assert confidence_band(49) == "weak"
