"""
Pooled score distribution across every SPACE dimension of every review.
"""

import logging

from utils import SCORE_VALUES

logger = logging.getLogger(__name__)

def empty_distribution():
    """Return a zeroed distribution: counts for 1..5 plus a running total."""
    distribution = {score: 0 for score in SCORE_VALUES}
    distribution["total"] = 0
    return distribution

def calculate_distribution(reviews):
    """
    Count every score in every review, pooling the five dimensions together.

    Args:
        reviews: Iterable of review dicts, each with a "scores" mapping

    Returns:
        Dict of score -> count with a "total" entry equal to the sum of counts
    """
    distribution = empty_distribution()
    for review in reviews:
        for score in (review.get("scores") or {}).values():
            if score not in SCORE_VALUES:
                logger.warning("Ignoring out-of-range score %r for film %s", score, review.get("film_id"))
                continue
            distribution[score] += 1
            distribution["total"] += 1
    return distribution

def distribution_to_storage(distribution):
    """Convert to the persisted layout: string keys "1".."5" and "total"."""
    stored = {str(score): int(distribution.get(score, 0)) for score in SCORE_VALUES}
    stored["total"] = int(distribution.get("total", 0))
    return stored

def distribution_from_storage(raw):
    """
    Rebuild a distribution from its persisted layout.

    Anything malformed yields a zeroed distribution. The total is always
    recomputed from the counts.
    """
    distribution = empty_distribution()
    if not isinstance(raw, dict):
        return distribution

    for score in SCORE_VALUES:
        value = raw.get(str(score), raw.get(score, 0))
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            return empty_distribution()
        distribution[score] = value
    distribution["total"] = sum(distribution[score] for score in SCORE_VALUES)
    return distribution
