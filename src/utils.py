"""
Utility functions and constants for the SPACE film rating system.
"""

# SPACE rubric, in display order
SPACE_DIMENSIONS = ["S", "P", "A", "C", "E"]

SPACE_DIMENSION_NAMES = {
    "S": "Story",
    "P": "Pageantry",
    "A": "Amusement",
    "C": "Captivation",
    "E": "Emotion"
}

SPACE_DIMENSION_DESCRIPTIONS = {
    "S": "Is the narrative compelling? Pacing, stakes, payoff.",
    "P": "How good does it look? Spectacle, beauty, visual coherence.",
    "A": "Is it fun? Would you watch again? Pure enjoyment.",
    "C": "Do the performers hold your attention? Presence, magnetism.",
    "E": "Does it make you feel something? Joy, dread, tears, warmth."
}

SCORE_LABELS = {
    1: "Below Par",
    2: "Average",
    3: "Above Average",
    4: "Superlative",
    5: "Era-Defining"
}

SCORE_VALUES = [1, 2, 3, 4, 5]

# Target shape of a well-calibrated rater
EXPECTED_DISTRIBUTION = {
    1: 0.40,
    2: 0.30,
    3: 0.20,
    4: 0.08,
    5: 0.02
}

# Advisory cutoffs
FIVES_WARNING_PERCENT = 10
FOURS_WARNING_PERCENT = 25
MIN_SCORES_FOR_ADVICE = 5
MIN_SCORES_FOR_CHI_SQUARED = 10
SIGNIFICANT_P_VALUE = 0.05
SUGGESTIVE_P_VALUE = 0.10
CHI_SQUARED_DEGREES_OF_FREEDOM = len(SCORE_VALUES) - 1

MIN_BENCHMARK_SAMPLES = 3
MAX_REVIEW_TEXT_LENGTH = 280

# Storage keys
REVIEWS_STORAGE_KEY = "movieclub_reviews"
CALIBRATION_STORAGE_KEY = "movieclub_calibration"

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"

LANGUAGE_NAMES = {
    "en": "English",
    "hi": "Hindi",
    "ta": "Tamil",
    "te": "Telugu",
    "ml": "Malayalam",
    "kn": "Kannada",
    "bn": "Bengali",
    "mr": "Marathi",
    "pa": "Punjabi",
    "gu": "Gujarati",
    "fr": "French",
    "es": "Spanish",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ru": "Russian",
    "ar": "Arabic"
}

def get_language_name(code):
    """Map an ISO 639-1 code to a display name, falling back to the upper-cased code."""
    if not code:
        return "Unknown"
    return LANGUAGE_NAMES.get(code, code.upper())

def get_image_url(path, size="w500"):
    """Build a TMDB image URL, or None when the film has no image."""
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE}/{size}{path}"

def validate_scores(scores):
    """
    Check that a SPACE score mapping is complete and in range.

    Args:
        scores: Mapping of dimension key to integer score

    Returns:
        Dict with exactly the five dimension keys

    Raises:
        ValueError: If a dimension is missing or a score is not an int in [1, 5]
    """
    if not isinstance(scores, dict):
        raise ValueError("Scores must be a mapping of SPACE dimension to score")

    validated = {}
    for dim in SPACE_DIMENSIONS:
        if dim not in scores:
            raise ValueError(f"Missing score for {SPACE_DIMENSION_NAMES[dim]} ({dim})")
        value = scores[dim]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Score for {dim} must be an integer, got {value!r}")
        if value not in SCORE_VALUES:
            raise ValueError(f"Score for {dim} must be between 1 and 5, got {value}")
        validated[dim] = value
    return validated

def validate_review_text(text):
    """Normalise review text, rejecting anything over the length cap."""
    text = (text or "").strip()
    if len(text) > MAX_REVIEW_TEXT_LENGTH:
        raise ValueError(
            f"Review text is {len(text)} characters; the limit is {MAX_REVIEW_TEXT_LENGTH}"
        )
    return text
