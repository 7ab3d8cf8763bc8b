"""
Review store: the single owner of a user's reviews and their derived calibration.

Every mutation rewrites both persisted keys (reviews and calibration) so they
never drift apart.
"""

import json
import logging
from datetime import datetime, timezone

from utils import REVIEWS_STORAGE_KEY, CALIBRATION_STORAGE_KEY, SCORE_VALUES
from score_distribution import (
    calculate_distribution,
    distribution_to_storage, distribution_from_storage
)
from calibration import calculate_percentages, get_calibration_advisory, build_calibration_report
from mode_benchmark import filter_reviews, get_benchmark_modes
from dimension_insights import get_dimension_insights
from review_export import export_reviews_csv

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)

def _utc_timestamp():
    return datetime.now(timezone.utc).isoformat()

def _parse_timestamp(value):
    """Parse an ISO-8601 timestamp (including a trailing Z); unparseable sorts last."""
    if not value:
        return _OLDEST
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return _OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

def _film_key(film_id):
    return str(film_id)

def _has_valid_scores(scores):
    """True when every stored score is an int in 1..5 (bool excluded)."""
    if not isinstance(scores, dict):
        return False
    return all(
        isinstance(value, int) and not isinstance(value, bool) and value in SCORE_VALUES
        for value in scores.values()
    )

class ReviewStore:
    """
    Reviews keyed by film id, plus the pooled score distribution.

    Args:
        storage: Object with get_item(key) and set_item(key, value),
            e.g. local_storage.JsonFileStorage
    """

    def __init__(self, storage):
        self.storage = storage
        self._reviews = self._load_reviews()
        self._calibration = calculate_distribution(self._reviews.values())
        self._check_stored_calibration()

    # -------------------------------------------------------------------------
    # Loading and persistence
    # -------------------------------------------------------------------------

    def _load_reviews(self):
        raw = self.storage.get_item(REVIEWS_STORAGE_KEY)
        if not raw:
            return {}

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Stored reviews are not valid JSON, starting empty: %s", e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Stored reviews are not a JSON object, starting empty")
            return {}

        reviews = {}
        for key, review in data.items():
            if not isinstance(review, dict) or not _has_valid_scores(review.get("scores")):
                logger.warning("Dropping malformed stored review for film %s", key)
                continue
            review = dict(review)
            review["film_id"] = _film_key(key)
            reviews[_film_key(key)] = review
        return reviews

    def _check_stored_calibration(self):
        raw = self.storage.get_item(CALIBRATION_STORAGE_KEY)
        if not raw:
            return
        try:
            stored = distribution_from_storage(json.loads(raw))
        except (TypeError, ValueError):
            logger.warning("Stored calibration is not valid JSON; using recomputed distribution")
            return
        if stored != self._calibration:
            logger.info("Stored calibration is stale; using distribution recomputed from reviews")

    def _persist(self):
        """Recompute the distribution and write both storage keys."""
        self._calibration = calculate_distribution(self._reviews.values())
        self.storage.set_item(REVIEWS_STORAGE_KEY, json.dumps(self._reviews))
        self.storage.set_item(CALIBRATION_STORAGE_KEY, json.dumps(distribution_to_storage(self._calibration)))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def save_review(self, film_id, film_metadata, scores, text=""):
        """
        Create or fully replace the review for a film.

        A replaced review gets a fresh created_at; nothing from the old
        review is kept.

        Args:
            film_id: Film identifier (str or int)
            film_metadata: Film record passed through untouched
            scores: Mapping of the five SPACE dimensions to scores in 1..5
            text: Optional note

        Returns:
            The stored review dict
        """
        key = _film_key(film_id)
        replacing = key in self._reviews

        review = {
            "film_id": key,
            "film_metadata": film_metadata,
            "scores": dict(scores),
            "text": text or "",
            "created_at": _utc_timestamp()
        }
        self._reviews[key] = review
        self._persist()

        logger.info("%s review for film %s", "Replaced" if replacing else "Saved", key)
        return review

    def delete_review(self, film_id):
        """Remove a film's review; unknown ids are ignored."""
        key = _film_key(film_id)
        if key not in self._reviews:
            logger.debug("No review to delete for film %s", key)
            return

        del self._reviews[key]
        self._persist()
        logger.info("Deleted review for film %s", key)

    def load_seed_data(self, seed_reviews):
        """
        Merge sample reviews without touching films the user already reviewed.

        Args:
            seed_reviews: Mapping of film id -> review (the key wins over any
                film_id in the value), or an iterable of reviews with film_id

        Returns:
            Number of reviews added
        """
        if isinstance(seed_reviews, dict):
            entries = seed_reviews.items()
        else:
            entries = ((review["film_id"], review) for review in seed_reviews)

        added = 0
        for film_id, review in entries:
            key = _film_key(film_id)
            if key in self._reviews:
                continue
            seeded = dict(review)
            seeded["film_id"] = key
            self._reviews[key] = seeded
            added += 1

        self._persist()
        logger.info("Loaded %d seed reviews (%d total)", added, len(self._reviews))
        return added

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_review(self, film_id):
        return self._reviews.get(_film_key(film_id))

    def get_all_reviews(self):
        """All reviews, most recently created first."""
        return sorted(
            self._reviews.values(),
            key=lambda r: _parse_timestamp(r.get("created_at")),
            reverse=True
        )

    def __len__(self):
        return len(self._reviews)

    def __contains__(self, film_id):
        return _film_key(film_id) in self._reviews

    @property
    def calibration(self):
        """Copy of the pooled score distribution."""
        return dict(self._calibration)

    def get_calibration_percentages(self):
        return calculate_percentages(self._calibration)

    def get_calibration_advisory(self):
        return get_calibration_advisory(self._calibration)

    def get_calibration_report(self):
        return build_calibration_report(self._calibration)

    def get_filtered_reviews(self, language=None, genre_ids=None):
        return filter_reviews(self._reviews.values(), language, genre_ids)

    def get_benchmark_modes(self, film_metadata):
        return get_benchmark_modes(list(self._reviews.values()), film_metadata)

    def get_dimension_insights(self, dimension):
        return get_dimension_insights(self.get_all_reviews(), dimension)

    def export_reviews_csv(self):
        return export_reviews_csv(self.get_all_reviews())

