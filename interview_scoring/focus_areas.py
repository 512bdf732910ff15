"""
Focus-area selection for the next interview.

Topics that showed up in the candidate's recent questions get a lower weight,
then `count` topics are drawn without replacement in proportion to weight.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Optional

from .loaders import get_previous_question_texts
from .rubrics import TOPICS, BASE_TOPIC_WEIGHT, TOPIC_WEIGHT_PENALTY, MIN_TOPIC_WEIGHT

logger = logging.getLogger(__name__)


def topic_weights(previous_questions: Iterable[str]) -> Dict[str, int]:
    weights = {topic: BASE_TOPIC_WEIGHT for topic in TOPICS}
    for q in previous_questions:
        lower_q = (q or "").lower()
        for topic in TOPICS:
            if topic.lower() in lower_q:
                weights[topic] = max(MIN_TOPIC_WEIGHT, weights[topic] - TOPIC_WEIGHT_PENALTY)
    return weights


def _draw(weights: Dict[str, int], taken: set, rng) -> str:
    total = sum(w for t, w in weights.items() if t not in taken)
    remainder = rng.random() * total
    last = None
    for topic, weight in weights.items():
        if topic in taken:
            continue
        last = topic
        remainder -= weight
        if remainder <= 0:
            return topic
    # float drift can leave a sliver of remainder past the last topic
    return last


def select_focus_areas(previous_questions: Iterable[str], count: int = 3,
                       rng: Optional[random.Random] = None) -> List[str]:
    """
    Pick `count` distinct topics, biased away from ones already asked about.

    `rng` only needs a ``random()`` method; pass a seeded ``random.Random``
    for reproducible draws. Topics come back in draw order.
    """
    if count < 0 or count > len(TOPICS):
        raise ValueError(f"count must be between 0 and {len(TOPICS)}, got {count}")

    rng = rng or random
    weights = topic_weights(previous_questions)

    selected: List[str] = []
    taken = set()
    while len(selected) < count:
        topic = _draw(weights, taken, rng)
        taken.add(topic)
        selected.append(topic)
    return selected


def choose_focus_areas(store, candidate_id: str, count: int = 3,
                       rng: Optional[random.Random] = None) -> List[str]:
    history = get_previous_question_texts(store, candidate_id)
    focus = select_focus_areas(history, count=count, rng=rng)
    logger.info("Selected focus areas for %s: %s (history=%d)", candidate_id, focus, len(history))
    return focus
