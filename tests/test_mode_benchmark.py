"""
Unit tests for peer-group mode benchmarks.
"""

import unittest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from mode_benchmark import (
    calculate_mode,
    calculate_dimension_modes,
    filter_reviews,
    get_benchmark_modes
)

DRAMA = {"id": 18, "name": "Drama"}
ACTION = {"id": 28, "name": "Action"}
COMEDY = {"id": 35, "name": "Comedy"}

def make_review(film_id, scores, language=None, genres=None):
    film = {"id": film_id, "title": f"Film {film_id}"}
    if language is not None:
        film["original_language"] = language
    if genres is not None:
        film["genres"] = genres
    return {"film_id": str(film_id), "film_metadata": film, "scores": dict(zip("SPACE", scores))}

class TestCalculateMode(unittest.TestCase):

    def test_most_frequent(self):
        self.assertEqual(calculate_mode([5, 5, 4, 3]), 5)
        self.assertEqual(calculate_mode([1, 2, 2, 3, 2]), 2)

    def test_empty(self):
        self.assertIsNone(calculate_mode([]))

    def test_ties_go_to_lowest_score(self):
        self.assertEqual(calculate_mode([4, 3, 4, 3]), 3)
        self.assertEqual(calculate_mode([5, 1]), 1)

class TestDimensionModes(unittest.TestCase):

    def test_modes_per_dimension(self):
        reviews = [
            make_review(1, (1, 2, 3, 4, 5)),
            make_review(2, (1, 2, 3, 4, 4)),
            make_review(3, (2, 3, 3, 4, 5)),
        ]
        self.assertEqual(calculate_dimension_modes(reviews), {"S": 1, "P": 2, "A": 3, "C": 4, "E": 5})

    def test_empty_reviews(self):
        self.assertIsNone(calculate_dimension_modes([]))

    def test_missing_dimension_returns_none_as_whole(self):
        """No partial mapping when one dimension has no scores at all."""
        reviews = [
            {"film_id": "1", "scores": {"S": 3, "P": 3, "A": 3, "E": 3}},
            {"film_id": "2", "scores": {"S": 4, "P": 4, "A": 4, "E": 4}},
        ]
        self.assertIsNone(calculate_dimension_modes(reviews))

    def test_partially_missing_dimension_still_has_mode(self):
        reviews = [
            {"film_id": "1", "scores": {"S": 3, "P": 3, "A": 3, "C": 2, "E": 3}},
            {"film_id": "2", "scores": {"S": 4, "P": 4, "A": 4, "C": None, "E": 4}},
        ]
        self.assertEqual(calculate_dimension_modes(reviews)["C"], 2)

class TestFilterReviews(unittest.TestCase):

    def setUp(self):
        self.reviews = [
            make_review(1, (1, 1, 1, 1, 1), "en", [DRAMA]),
            make_review(2, (2, 2, 2, 2, 2), "en", [ACTION, DRAMA]),
            make_review(3, (3, 3, 3, 3, 3), "hi", [ACTION]),
            make_review(4, (4, 4, 4, 4, 4)),
            {"film_id": "5", "film_metadata": None, "scores": {"S": 5}},
        ]

    def ids(self, reviews):
        return [r["film_id"] for r in reviews]

    def test_no_filters_match_everything(self):
        self.assertEqual(self.ids(filter_reviews(self.reviews)), ["1", "2", "3", "4", "5"])
        self.assertEqual(len(filter_reviews(self.reviews, None, [])), 5)

    def test_language_filter(self):
        self.assertEqual(self.ids(filter_reviews(self.reviews, "en")), ["1", "2"])

    def test_genre_filter_intersects(self):
        self.assertEqual(self.ids(filter_reviews(self.reviews, genre_ids=[28])), ["2", "3"])
        self.assertEqual(self.ids(filter_reviews(self.reviews, genre_ids=[35, 18])), ["1", "2"])

    def test_both_filters(self):
        self.assertEqual(self.ids(filter_reviews(self.reviews, "en", [28])), ["2"])

    def test_missing_metadata_never_matches(self):
        self.assertNotIn("4", self.ids(filter_reviews(self.reviews, "en")))
        self.assertNotIn("5", self.ids(filter_reviews(self.reviews, genre_ids=[18])))

class TestBenchmarkModes(unittest.TestCase):

    def test_language_and_genre_group(self):
        reviews = [make_review(i, (2, 2, 2, 2, 2), "hi", [ACTION]) for i in range(3)]
        film = {"original_language": "hi", "language_name": "Hindi", "genres": [ACTION, DRAMA]}
        result = get_benchmark_modes(reviews, film)
        self.assertEqual(result["genre_mode"], {"S": 2, "P": 2, "A": 2, "C": 2, "E": 2})
        self.assertEqual(result["genre_mode_label"], "Hindi Action")
        self.assertEqual(result["overall_mode"], {"S": 2, "P": 2, "A": 2, "C": 2, "E": 2})
        self.assertEqual(result["overall_count"], 3)

    def test_falls_back_to_language(self):
        reviews = [
            make_review(1, (1, 1, 1, 1, 1), "hi", [DRAMA]),
            make_review(2, (1, 1, 1, 1, 1), "hi", [COMEDY]),
            make_review(3, (1, 1, 1, 1, 1), "hi", [ACTION]),
        ]
        film = {"original_language": "hi", "genres": [ACTION]}
        result = get_benchmark_modes(reviews, film)
        self.assertEqual(result["genre_mode_label"], "Hindi")
        self.assertEqual(result["genre_mode"]["S"], 1)

    def test_language_label_falls_back_to_code(self):
        reviews = [make_review(i, (3, 3, 3, 3, 3), "xx", [COMEDY]) for i in range(3)]
        result = get_benchmark_modes(reviews, {"original_language": "xx"})
        self.assertEqual(result["genre_mode_label"], "XX")

    def test_falls_back_to_genre_only(self):
        """Two same-language reviews are too few; the genre group across languages wins."""
        reviews = [
            make_review(1, (5, 5, 5, 5, 5), "ta", [ACTION]),
            make_review(2, (5, 5, 5, 5, 5), "ta", [ACTION]),
            make_review(3, (4, 4, 4, 4, 4), "en", [ACTION]),
            make_review(4, (4, 4, 4, 4, 4), "en", [ACTION]),
        ]
        film = {"original_language": "ta", "genres": [ACTION]}
        result = get_benchmark_modes(reviews, film)
        self.assertEqual(result["genre_mode_label"], "Action")
        self.assertEqual(result["genre_mode"]["S"], 4)

    def test_below_minimum_sample_returns_none(self):
        reviews = [
            make_review(1, (5, 5, 5, 5, 5), "ko", [DRAMA]),
            make_review(2, (5, 5, 5, 5, 5), "ko", [DRAMA]),
        ]
        result = get_benchmark_modes(reviews, {"original_language": "ko", "genres": [DRAMA]})
        self.assertIsNone(result["genre_mode"])
        self.assertIsNone(result["genre_mode_label"])
        self.assertIsNone(result["overall_mode"])
        self.assertEqual(result["overall_count"], 2)

    def test_two_language_matches_do_not_benchmark(self):
        """Only two Korean reviews: no language benchmark, overall uses all three."""
        reviews = [
            make_review(1, (5, 5, 5, 5, 5), "ko", [DRAMA]),
            make_review(2, (5, 5, 5, 5, 5), "ko", [DRAMA]),
            make_review(3, (1, 1, 1, 1, 1), "en", [COMEDY]),
        ]
        result = get_benchmark_modes(reviews, {"original_language": "ko", "genres": [DRAMA]})
        self.assertIsNone(result["genre_mode"])
        self.assertEqual(result["overall_mode"]["S"], 5)

    def test_missing_metadata(self):
        reviews = [make_review(i, (2, 2, 2, 2, 2)) for i in range(3)]
        result = get_benchmark_modes(reviews, None)
        self.assertIsNone(result["genre_mode"])
        self.assertEqual(result["overall_mode"]["E"], 2)

if __name__ == '__main__':
    unittest.main()
