"""
Tests for inverse trigonometric constructors and the circular mean.
"""

import math
import unittest

import numpy as np
from scipy.stats import circmean

from ang import Degrees, Radians, acos, asin, atan, atan2, mean_angle


class TestInverseTrig(unittest.TestCase):
    """Test asin, acos, atan and atan2."""

    def test_asin(self):
        """Test arcsine inside and outside its domain."""
        self.assertEqual(asin(1.0), Radians(math.pi / 2))
        self.assertEqual(asin(0.0), Radians(0.0))
        self.assertIsInstance(asin(-0.5), Radians)
        self.assertAlmostEqual(asin(-0.5).in_degrees(), -30.0, delta=1e-9)
        self.assertIsNone(asin(1.0000001))
        self.assertIsNone(asin(-2))
        self.assertIsNone(asin(math.nan))

    def test_acos(self):
        """Test arccosine inside and outside its domain."""
        self.assertEqual(acos(-1.0), Radians(math.pi))
        self.assertAlmostEqual(acos(0.5).in_degrees(), 60.0, delta=1e-9)
        self.assertIsNone(acos(1.5))
        self.assertIsNone(acos(-math.inf))

    def test_atan(self):
        """Test arctangent over the whole real line."""
        self.assertEqual(atan(0.0), Radians(0.0))
        self.assertAlmostEqual(atan(1.0).in_degrees(), 45.0, delta=1e-9)
        self.assertEqual(atan(math.inf), Radians(math.pi / 2))
        self.assertEqual(atan(-math.inf), Radians(-math.pi / 2))

    def test_atan2(self):
        """Test the four quadrants and the origin."""
        self.assertAlmostEqual(atan2(1.0, 1.0).in_degrees(), 45.0, delta=1e-9)
        self.assertAlmostEqual(atan2(1.0, -1.0).in_degrees(), 135.0, delta=1e-9)
        self.assertAlmostEqual(atan2(-1.0, -1.0).in_degrees(), -135.0, delta=1e-9)
        self.assertAlmostEqual(atan2(-1.0, 1.0).in_degrees(), -45.0, delta=1e-9)
        self.assertEqual(atan2(0.0, 0.0), Radians(0.0))
        self.assertEqual(atan2(0.0, -1.0), Radians(math.pi))

    def test_numpy_kinds(self):
        """Test that NumPy inputs keep their kind."""
        result = asin(np.float32(0.5))
        self.assertIsInstance(result.value, np.float32)
        self.assertIsNone(acos(np.float32(2)))
        self.assertIsInstance(atan2(np.float32(1), np.float32(1)).value, np.float32)


class TestMeanAngle(unittest.TestCase):
    """Test the circular mean."""

    def test_concrete_cases(self):
        """Test known means, including wraparound."""
        self.assertAlmostEqual(mean_angle([Degrees(90.0)]).in_degrees(), 90.0, delta=1e-6)
        self.assertAlmostEqual(mean_angle([Degrees(90.0), Degrees(90.0)]).in_degrees(), 90.0, delta=1e-6)
        self.assertAlmostEqual(
            mean_angle([Degrees(90.0), Degrees(180.0), Degrees(270.0)]).in_degrees(), 180.0, delta=1e-6
        )
        self.assertAlmostEqual(mean_angle([Degrees(20.0), Degrees(350.0)]).in_degrees(), 5.0, delta=1e-6)

    def test_mean_around_zero(self):
        """Test a set whose mean sits on the 0/2π seam."""
        mu = mean_angle([Degrees(270.0), Degrees(360.0), Degrees(90.0)])
        self.assertLess(mu.min_dist(Radians(0.0)).in_radians(), 1.0e-10)

    def test_result_is_normalized_radians(self):
        """Test that the mean is Radians in [0, 2π)."""
        mu = mean_angle([Degrees(-100.0), Degrees(-80.0)])
        self.assertIsInstance(mu, Radians)
        self.assertTrue(0.0 <= mu.in_radians() < 2 * math.pi)
        self.assertAlmostEqual(mu.in_degrees(), 270.0, delta=1e-6)

    def test_mixed_units(self):
        """Test that units can be mixed in one sequence."""
        mu = mean_angle([Degrees(10.0), Radians(math.radians(30.0))])
        self.assertAlmostEqual(mu.in_degrees(), 20.0, delta=1e-6)

    def test_consumes_iterator_once(self):
        """Test that generators are consumed lazily, exactly once."""
        produced = []

        def angles():
            for value in (350.0, 10.0, 0.0):
                produced.append(value)
                yield Degrees(value)

        mu = mean_angle(angles())
        self.assertEqual(produced, [350.0, 10.0, 0.0])
        self.assertLess(mu.min_dist(Degrees(0.0)).in_degrees(), 1e-6)

    def test_empty_sequence_raises(self):
        """Test that the mean of nothing is an explicit error."""
        with self.assertRaises(ValueError):
            mean_angle([])
        with self.assertRaises(ValueError):
            mean_angle(iter(()))

    def test_matches_scipy_circmean(self):
        """Test random samples against scipy's circular mean."""
        rng = np.random.default_rng(1234)
        for _ in range(50):
            # concentrated samples so the mean direction is well defined
            center = rng.uniform(-720.0, 720.0)
            samples = rng.normal(center, 40.0, size=int(rng.integers(1, 30)))
            expected = circmean(np.radians(samples), high=2 * math.pi, low=0.0)
            mu = mean_angle(Degrees(float(v)) for v in samples)
            self.assertLess(mu.min_dist(Radians(float(expected))).in_radians(), 1e-9)


if __name__ == '__main__':
    unittest.main()
