"""
Per-dimension deep dive over a user's reviews.
"""

from review_export import reviews_to_dataframe, get_review_peaks
from utils import SPACE_DIMENSIONS, SPACE_DIMENSION_NAMES, SCORE_VALUES

# How far a dimension average may drift from the mean before it is flagged
INDEXING_MARGIN = 0.3

def get_dimension_averages(reviews):
    """Mean score per dimension; 0 for a dimension nobody has scored."""
    df = reviews_to_dataframe(reviews)
    averages = {}
    for dim in SPACE_DIMENSIONS:
        column = df[dim].dropna()
        averages[dim] = float(column.mean()) if not column.empty else 0.0
    return averages

def get_dimension_insights(reviews, dimension):
    """
    Summarize how a user scores one SPACE dimension.

    Args:
        reviews: List of review dicts
        dimension: One of SPACE_DIMENSIONS

    Returns:
        Dict with the average, 1-5 distribution, peak/5/4 films,
        per-dimension averages and over/under-indexing flags

    Raises:
        ValueError: If dimension is not a SPACE dimension
    """
    if dimension not in SPACE_DIMENSIONS:
        raise ValueError(f"Unknown SPACE dimension: {dimension!r}")

    reviews = list(reviews)
    df = reviews_to_dataframe(reviews)
    column = df[dimension].dropna()

    counts = column.value_counts()
    distribution = {score: int(counts.get(score, 0)) for score in SCORE_VALUES}
    average = round(float(column.mean()), 1) if not column.empty else 0.0

    averages = get_dimension_averages(reviews)
    overall_average = sum(averages.values()) / len(SPACE_DIMENSIONS)

    peak_films = [r for r in reviews if dimension in get_review_peaks(r.get("scores") or {})]
    five_films = [r for r in reviews if (r.get("scores") or {}).get(dimension) == 5]
    four_films = [r for r in reviews if (r.get("scores") or {}).get(dimension) == 4]

    five_percentage = distribution[5] / len(column) * 100 if len(column) else 0.0

    return {
        "dimension": dimension,
        "name": SPACE_DIMENSION_NAMES[dimension],
        "count": int(len(column)),
        "average": average,
        "distribution": distribution,
        "peak_films": peak_films,
        "five_films": five_films,
        "four_films": four_films,
        "dimension_averages": averages,
        "overall_average": overall_average,
        "is_over_indexing": average > overall_average + INDEXING_MARGIN,
        "is_under_indexing": average < overall_average - INDEXING_MARGIN,
        "five_percentage": five_percentage
    }
