"""
Review export: tabular data for downloads and text summaries for sharing.
"""

import pandas as pd

from utils import SPACE_DIMENSIONS, SPACE_DIMENSION_NAMES, SCORE_LABELS, get_language_name

EXPORT_COLUMNS = [
    "film_id", "title", "year", "language",
    *SPACE_DIMENSIONS,
    "text", "created_at"
]

def reviews_to_dataframe(reviews):
    """
    Flatten reviews into a DataFrame with one row per film.

    Args:
        reviews: Iterable of review dicts

    Returns:
        pandas DataFrame with EXPORT_COLUMNS; score columns are nullable ints
    """
    rows = []
    for review in reviews:
        film = review.get("film_metadata") or {}
        scores = review.get("scores") or {}
        release_date = film.get("release_date") or ""
        row = {
            "film_id": str(review.get("film_id", "")),
            "title": film.get("title", ""),
            "year": release_date[:4],
            "language": film.get("language_name") or (
                get_language_name(film["original_language"]) if film.get("original_language") else ""
            ),
            "text": review.get("text", ""),
            "created_at": review.get("created_at", "")
        }
        for dim in SPACE_DIMENSIONS:
            row[dim] = scores.get(dim)
        rows.append(row)

    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    for dim in SPACE_DIMENSIONS:
        df[dim] = df[dim].astype("Int64")
    return df

def export_reviews_csv(reviews):
    """Serialize reviews to CSV text, ready for a download button."""
    return reviews_to_dataframe(reviews).to_csv(index=False)

def get_review_peaks(scores):
    """Dimensions tied for the review's top score, when that score is 4 or 5."""
    if not scores:
        return []
    max_score = max(scores.values())
    if max_score < 4:
        return []
    return [dim for dim in SPACE_DIMENSIONS if scores.get(dim) == max_score]

def build_credits_line(film_metadata):
    """Short credits line: first director, two leads, composer."""
    credits = (film_metadata or {}).get("processed_credits") or {}
    parts = []
    if credits.get("directors"):
        parts.append(f"Dir: {credits['directors'][0]}")
    if credits.get("top_cast"):
        parts.append(", ".join(credits["top_cast"][:2]))
    if credits.get("composers"):
        parts.append(f"🎵 {credits['composers'][0]}")
    return " • ".join(parts)

def build_share_text(review):
    """
    Plain-text summary of a review for share intents and clipboards.

    Args:
        review: Review dict

    Returns:
        Multi-line string with title, credits, the five scores and the note
    """
    film = review.get("film_metadata") or {}
    scores = review.get("scores") or {}

    title = film.get("title") or f"Film {review.get('film_id')}"
    year = (film.get("release_date") or "")[:4]
    lines = [f"{title} ({year})" if year else title]

    credits_line = build_credits_line(film)
    if credits_line:
        lines.append(credits_line)

    lines.append("")
    peaks = get_review_peaks(scores)
    for dim in SPACE_DIMENSIONS:
        score = scores.get(dim)
        if score is None:
            continue
        marker = " ★" if dim in peaks else ""
        lines.append(f"{dim} {SPACE_DIMENSION_NAMES[dim]}: {score} ({SCORE_LABELS[score]}){marker}")

    if review.get("text"):
        lines.append("")
        lines.append(review["text"])

    return "\n".join(lines)
