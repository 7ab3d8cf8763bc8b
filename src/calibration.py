"""
Calibration analysis: how closely a user's pooled scores match the target distribution.

The goodness-of-fit test is a chi-squared test whose p-value is approximated
in closed form (Wilson-Hilferty cube-root transform into a normal deviate,
then the Abramowitz-Stegun 7.1.26 approximation of the normal CDF).
"""

import math
import logging

from utils import (
    SCORE_VALUES, EXPECTED_DISTRIBUTION, CHI_SQUARED_DEGREES_OF_FREEDOM,
    FIVES_WARNING_PERCENT, FOURS_WARNING_PERCENT, MIN_SCORES_FOR_ADVICE,
    MIN_SCORES_FOR_CHI_SQUARED, SIGNIFICANT_P_VALUE, SUGGESTIVE_P_VALUE
)

logger = logging.getLogger(__name__)

# Abramowitz & Stegun 7.1.26 coefficients (|error| < 1.5e-7)
_AS_A1 = 0.254829592
_AS_A2 = -0.284496736
_AS_A3 = 1.421413741
_AS_A4 = -1.453152027
_AS_A5 = 1.061405429
_AS_P = 0.3275911

def calculate_percentages(distribution):
    """
    Share of each score as a percentage of all pooled scores.

    Args:
        distribution: Dict of score -> count with a "total" entry

    Returns:
        Dict of score -> percent; all zeros when there are no scores
    """
    total = distribution.get("total", 0)
    if total <= 0:
        return {score: 0 for score in SCORE_VALUES}
    return {score: distribution.get(score, 0) / total * 100 for score in SCORE_VALUES}

def calculate_chi_squared(observed, total, expected=None):
    """
    Pearson chi-squared statistic of observed counts against expected shares.

    Buckets whose expected count is below 1 are left out of the sum.

    Args:
        observed: Dict of score -> observed count
        total: Number of pooled observations
        expected: Dict of score -> expected share (defaults to EXPECTED_DISTRIBUTION)

    Returns:
        Float chi-squared statistic
    """
    if expected is None:
        expected = EXPECTED_DISTRIBUTION

    chi_squared = 0.0
    for score in SCORE_VALUES:
        observed_count = observed.get(score, 0)
        expected_count = expected[score] * total
        if expected_count < 1:
            continue
        chi_squared += (observed_count - expected_count) ** 2 / expected_count
    return chi_squared

def normal_cdf(x):
    """Standard normal CDF via the Abramowitz-Stegun erf approximation."""
    sign = -1 if x < 0 else 1
    x = abs(x) / math.sqrt(2)

    t = 1.0 / (1.0 + _AS_P * x)
    y = 1.0 - (((((_AS_A5 * t + _AS_A4) * t) + _AS_A3) * t + _AS_A2) * t + _AS_A1) * t * math.exp(-x * x)

    return 0.5 * (1.0 + sign * y)

def chi_squared_p_value(chi_squared, degrees_of_freedom=CHI_SQUARED_DEGREES_OF_FREEDOM):
    """
    Upper-tail probability of a chi-squared statistic.

    Args:
        chi_squared: Test statistic
        degrees_of_freedom: Degrees of freedom (4 for five score buckets)

    Returns:
        Float in [0, 1]; 1.0 for a non-positive statistic or degrees of freedom
    """
    if chi_squared <= 0 or degrees_of_freedom <= 0:
        return 1.0

    k = degrees_of_freedom
    z = (chi_squared / k) ** (1 / 3) - (1 - 2 / (9 * k))
    z_score = z / math.sqrt(2 / (9 * k))

    p_value = 1 - normal_cdf(z_score)
    return min(max(p_value, 0.0), 1.0)

def get_calibration_advisory(distribution):
    """
    Pick the single most relevant calibration message.

    Rules are checked in order and the first match wins:
    too little data, overused 5s, overused 4s, then the chi-squared test
    (only with at least ten pooled scores), and finally a healthy verdict.

    Args:
        distribution: Dict of score -> count with a "total" entry

    Returns:
        Dict with "severity" (info, warning, error, success) and "message"
    """
    total = distribution.get("total", 0)
    percentages = calculate_percentages(distribution)

    if total < MIN_SCORES_FOR_ADVICE:
        return {"severity": "info", "message": "Keep reviewing to see your calibration stats."}

    if percentages[5] > FIVES_WARNING_PERCENT:
        return {
            "severity": "warning",
            "message": (
                f"Your 5s are {percentages[5]:.0f}% of scores. Era-defining should be ~2%, "
                "so reserve it for truly exceptional films."
            )
        }

    if percentages[4] > FOURS_WARNING_PERCENT:
        return {
            "severity": "warning",
            "message": (
                f"Your 4s are {percentages[4]:.0f}% of scores. Superlative should be ~8%, "
                "the top decile."
            )
        }

    if total >= MIN_SCORES_FOR_CHI_SQUARED:
        chi_squared = calculate_chi_squared(distribution, total)
        p_value = chi_squared_p_value(chi_squared)
        logger.debug("Calibration chi-squared=%.4f p=%.4f over %d scores", chi_squared, p_value, total)

        if p_value < SIGNIFICANT_P_VALUE:
            return {
                "severity": "error",
                "message": (
                    "Your rating distribution is highly unusual (p < 0.05). "
                    "Consider whether you're applying the scale consistently."
                )
            }

        if p_value < SUGGESTIVE_P_VALUE:
            return {
                "severity": "warning",
                "message": (
                    "Your rating distribution is somewhat unusual (p < 0.10). "
                    "Most films should be 1s and 2s."
                )
            }

    return {"severity": "success", "message": "Your calibration looks healthy. Keep it up!"}

def build_calibration_report(distribution):
    """Bundle everything the calibration panel shows."""
    total = distribution.get("total", 0)
    chi_squared = None
    p_value = None
    if total >= MIN_SCORES_FOR_CHI_SQUARED:
        chi_squared = calculate_chi_squared(distribution, total)
        p_value = chi_squared_p_value(chi_squared)

    return {
        "total": total,
        "review_count": math.ceil(total / len(EXPECTED_DISTRIBUTION)),
        "percentages": calculate_percentages(distribution),
        "expected_percentages": {score: share * 100 for score, share in EXPECTED_DISTRIBUTION.items()},
        "chi_squared": chi_squared,
        "p_value": p_value,
        "advisory": get_calibration_advisory(distribution)
    }
