"""
Unit tests for calibration analysis.
"""

import unittest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from calibration import (
    calculate_percentages,
    calculate_chi_squared,
    normal_cdf,
    chi_squared_p_value,
    get_calibration_advisory,
    build_calibration_report
)

def dist(c1, c2, c3, c4, c5):
    return {1: c1, 2: c2, 3: c3, 4: c4, 5: c5, "total": c1 + c2 + c3 + c4 + c5}

REFERENCE_SHAPE = dist(40, 30, 20, 8, 2)

class TestPercentages(unittest.TestCase):

    def test_zero_total(self):
        self.assertEqual(calculate_percentages(dist(0, 0, 0, 0, 0)), {1: 0, 2: 0, 3: 0, 4: 0, 5: 0})

    def test_sums_to_hundred(self):
        percentages = calculate_percentages(dist(3, 1, 1, 1, 1))
        self.assertAlmostEqual(sum(percentages.values()), 100.0)
        self.assertAlmostEqual(percentages[1], 3 / 7 * 100)

    def test_idempotent(self):
        distribution = dist(5, 4, 3, 2, 1)
        self.assertEqual(calculate_percentages(distribution), calculate_percentages(distribution))

class TestChiSquared(unittest.TestCase):

    def test_reference_shape_is_zero(self):
        self.assertAlmostEqual(calculate_chi_squared(REFERENCE_SHAPE, 100), 0.0)

    def test_small_expected_cells_excluded(self):
        """With 10 scores, the 4 and 5 buckets expect < 1 and are skipped."""
        observed = dist(0, 0, 10, 0, 0)
        # (0-4)^2/4 + (0-3)^2/3 + (10-2)^2/2
        self.assertAlmostEqual(calculate_chi_squared(observed, 10), 4 + 3 + 32)

    def test_all_fives_with_small_sample(self):
        """Only buckets 1-3 count for ten scores, so all-5s still scores 9."""
        self.assertAlmostEqual(calculate_chi_squared(dist(0, 0, 0, 0, 10), 10), 4 + 3 + 2)

    def test_custom_expected(self):
        expected = {1: 0.2, 2: 0.2, 3: 0.2, 4: 0.2, 5: 0.2}
        self.assertAlmostEqual(calculate_chi_squared(dist(10, 10, 10, 10, 10), 50, expected), 0.0)

class TestPValue(unittest.TestCase):

    def test_normal_cdf_reference_points(self):
        self.assertAlmostEqual(normal_cdf(0), 0.5, places=6)
        self.assertAlmostEqual(normal_cdf(1.96), 0.9750021, places=6)
        self.assertAlmostEqual(normal_cdf(-1.96), 0.0249979, places=6)
        self.assertAlmostEqual(normal_cdf(1.0) + normal_cdf(-1.0), 1.0, places=9)

    def test_degenerate_inputs_return_one(self):
        self.assertEqual(chi_squared_p_value(0), 1.0)
        self.assertEqual(chi_squared_p_value(-3.2), 1.0)
        self.assertEqual(chi_squared_p_value(5.0, 0), 1.0)
        self.assertEqual(chi_squared_p_value(5.0, -1), 1.0)

    def test_critical_values(self):
        """Wilson-Hilferty lands close to the exact df=4 critical values."""
        self.assertAlmostEqual(chi_squared_p_value(9.4877, 4), 0.05, delta=0.002)
        self.assertAlmostEqual(chi_squared_p_value(7.7794, 4), 0.10, delta=0.003)
        self.assertAlmostEqual(chi_squared_p_value(13.2767, 4), 0.01, delta=0.001)

    def test_monotonic_decreasing(self):
        values = [chi_squared_p_value(x) for x in (0.5, 2, 4, 8, 16, 32)]
        self.assertEqual(values, sorted(values, reverse=True))
        for value in values:
            self.assertGreaterEqual(value, 0.0)
            self.assertLessEqual(value, 1.0)

    def test_default_degrees_of_freedom(self):
        self.assertEqual(chi_squared_p_value(6.0), chi_squared_p_value(6.0, 4))

class TestCalibrationAdvisory(unittest.TestCase):

    def test_not_enough_data(self):
        for distribution in (dist(0, 0, 0, 0, 0), dist(0, 0, 0, 0, 4)):
            with self.subTest(distribution=distribution):
                advisory = get_calibration_advisory(distribution)
                self.assertEqual(advisory["severity"], "info")

    def test_reference_shape_is_healthy(self):
        advisory = get_calibration_advisory(REFERENCE_SHAPE)
        self.assertEqual(advisory["severity"], "success")

    def test_overused_fives_beats_chi_squared(self):
        advisory = get_calibration_advisory(dist(0, 0, 0, 0, 10))
        self.assertEqual(advisory["severity"], "warning")
        self.assertIn("5s are 100%", advisory["message"])

    def test_fives_guardrail_without_chi_squared(self):
        """Five scores is enough for the guardrails even though chi-squared needs ten."""
        advisory = get_calibration_advisory(dist(2, 1, 1, 0, 1))
        self.assertEqual(advisory["severity"], "warning")
        self.assertIn("5s are 20%", advisory["message"])

    def test_fives_at_threshold_do_not_warn(self):
        advisory = get_calibration_advisory(dist(40, 30, 20, 0, 10))
        self.assertNotIn("5s are", advisory["message"])

    def test_overused_fours(self):
        advisory = get_calibration_advisory(dist(3, 2, 0, 5, 0))
        self.assertEqual(advisory["severity"], "warning")
        self.assertIn("4s are 50%", advisory["message"])

    def test_highly_unusual(self):
        advisory = get_calibration_advisory(dist(0, 0, 10, 0, 0))
        self.assertEqual(advisory["severity"], "error")
        self.assertIn("p < 0.05", advisory["message"])

    def test_somewhat_unusual(self):
        """Chi-squared of about 9.08 falls between the 0.05 and 0.10 cutoffs."""
        advisory = get_calibration_advisory(dist(29, 30, 31, 8, 2))
        self.assertEqual(advisory["severity"], "warning")
        self.assertIn("p < 0.10", advisory["message"])

    def test_chi_squared_skipped_below_ten_scores(self):
        """Nine all-3 scores would fail the test, but there's too little data to run it."""
        advisory = get_calibration_advisory(dist(0, 0, 9, 0, 0))
        self.assertEqual(advisory["severity"], "success")

class TestCalibrationReport(unittest.TestCase):

    def test_report_with_enough_data(self):
        report = build_calibration_report(REFERENCE_SHAPE)
        self.assertEqual(report["total"], 100)
        self.assertEqual(report["review_count"], 20)
        self.assertAlmostEqual(report["chi_squared"], 0.0)
        self.assertAlmostEqual(report["p_value"], 1.0)
        self.assertAlmostEqual(report["expected_percentages"][1], 40.0)
        self.assertEqual(report["advisory"]["severity"], "success")

    def test_report_small_sample(self):
        report = build_calibration_report(dist(1, 1, 1, 1, 1))
        self.assertIsNone(report["chi_squared"])
        self.assertIsNone(report["p_value"])
        self.assertEqual(report["review_count"], 1)

if __name__ == '__main__':
    unittest.main()
