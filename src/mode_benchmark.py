"""
Peer-group benchmarks: the typical (modal) SPACE scores for similar films.
"""

import logging
from collections import Counter

from utils import SPACE_DIMENSIONS, MIN_BENCHMARK_SAMPLES, get_language_name

logger = logging.getLogger(__name__)

def calculate_mode(scores):
    """
    Most frequent value in a sequence of scores.

    Ties go to the lowest score.

    Args:
        scores: Sequence of integer scores

    Returns:
        The modal score, or None for an empty sequence
    """
    if not scores:
        return None

    frequency = Counter(scores)
    max_freq = max(frequency.values())
    return min(score for score, freq in frequency.items() if freq == max_freq)

def calculate_dimension_modes(reviews):
    """
    Mode of each SPACE dimension across a set of reviews.

    Args:
        reviews: List of review dicts

    Returns:
        Dict of dimension -> mode, or None unless every dimension has a mode
    """
    if not reviews:
        return None

    modes = {}
    for dim in SPACE_DIMENSIONS:
        scores = [
            r["scores"][dim] for r in reviews
            if r.get("scores") and r["scores"].get(dim) is not None
        ]
        modes[dim] = calculate_mode(scores)

    if any(mode is None for mode in modes.values()):
        return None

    return modes

def _film_genre_ids(film_metadata):
    genres = (film_metadata or {}).get("genres") or []
    return [g.get("id") for g in genres if isinstance(g, dict) and g.get("id") is not None]

def filter_reviews(reviews, language=None, genre_ids=None):
    """
    Select reviews by film language and genre.

    A review matches when its film's original_language equals language (if
    given) and its film shares at least one genre with genre_ids (if given
    and non-empty). Films missing either field never match that filter.

    Args:
        reviews: Iterable of review dicts
        language: ISO 639-1 code, or None for any language
        genre_ids: Iterable of TMDB genre ids, or None/empty for any genre

    Returns:
        List of matching reviews, in input order
    """
    genre_ids = set(genre_ids or [])
    matches = []
    for review in reviews:
        film = review.get("film_metadata") or {}

        if language and film.get("original_language") != language:
            continue

        if genre_ids and not genre_ids.intersection(_film_genre_ids(film)):
            continue

        matches.append(review)
    return matches

def get_benchmark_modes(reviews, film_metadata, min_samples=MIN_BENCHMARK_SAMPLES):
    """
    Benchmark modes for a film against the user's other reviews.

    The peer group is the first of these with at least min_samples reviews:
    same language and primary genre, same language, same primary genre.
    The overall mode uses every review once there are min_samples of them.

    Args:
        reviews: List of all review dicts
        film_metadata: Film record with original_language and genres
        min_samples: Smallest group size that gets a mode

    Returns:
        Dict with genre_mode, genre_mode_label, overall_mode and overall_count
    """
    reviews = list(reviews)
    film_metadata = film_metadata or {}

    overall_mode = calculate_dimension_modes(reviews) if len(reviews) >= min_samples else None

    language = film_metadata.get("original_language")
    genres = [g for g in (film_metadata.get("genres") or []) if isinstance(g, dict) and g.get("id") is not None]
    primary_genre = genres[0] if genres else None

    language_name = film_metadata.get("language_name") or get_language_name(language)
    genre_name = (primary_genre or {}).get("name") or f"Genre {(primary_genre or {}).get('id')}"

    candidates = []
    if language and primary_genre:
        candidates.append(((language, [primary_genre["id"]]), f"{language_name} {genre_name}"))
    if language:
        candidates.append(((language, None), language_name))
    if primary_genre:
        candidates.append(((None, [primary_genre["id"]]), genre_name))

    genre_mode = None
    genre_mode_label = None
    for (lang_filter, genre_filter), label in candidates:
        group = filter_reviews(reviews, lang_filter, genre_filter)
        if len(group) < min_samples:
            continue
        genre_mode = calculate_dimension_modes(group)
        if genre_mode is not None:
            genre_mode_label = label
            logger.debug("Benchmark peer group '%s' has %d reviews", label, len(group))
            break

    return {
        "genre_mode": genre_mode,
        "genre_mode_label": genre_mode_label,
        "overall_mode": overall_mode,
        "overall_count": len(reviews)
    }
