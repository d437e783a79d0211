"""
Tests for approximate equality of scalars and angles.
"""

import math
import unittest
from fractions import Fraction

import numpy as np

from ang import Degrees, Radians, approx, config


class TestConfigDefaults(unittest.TestCase):
    """Test per-kind tolerance defaults."""

    def test_float_defaults(self):
        """Test that floats default to machine epsilon."""
        self.assertEqual(config.default_epsilon(float), np.finfo(np.float64).eps)
        self.assertEqual(config.default_max_relative(float), np.finfo(np.float64).eps)
        self.assertEqual(config.default_epsilon(np.float32), np.finfo(np.float32).eps)
        self.assertEqual(config.DEFAULT_MAX_ULPS, 4)

    def test_exact_kinds_default_to_zero(self):
        """Test that exact kinds compare with zero tolerance."""
        self.assertEqual(config.default_epsilon(int), 0)
        self.assertEqual(config.default_epsilon(Fraction), Fraction(0))
        self.assertEqual(config.default_epsilon(np.int32), np.int32(0))


class TestScalarApprox(unittest.TestCase):
    """Test the scalar comparison functions."""

    def test_abs_diff_eq(self):
        """Test absolute tolerance."""
        self.assertTrue(approx.abs_diff_eq(1.0, 1.05, 0.1))
        self.assertFalse(approx.abs_diff_eq(1.0, 1.2, 0.1))
        self.assertTrue(approx.abs_diff_eq(0.1 + 0.2, 0.3))
        self.assertFalse(approx.abs_diff_eq(math.nan, math.nan, 1.0))
        self.assertTrue(approx.abs_diff_eq(3, 3))
        self.assertFalse(approx.abs_diff_eq(3, 4))

    def test_relative_eq(self):
        """Test relative tolerance scales with magnitude."""
        self.assertTrue(approx.relative_eq(1e10, 1e10 + 1.0, max_relative=1e-9))
        self.assertFalse(approx.relative_eq(1.0, 2.0, max_relative=0.1))
        self.assertTrue(approx.relative_eq(100.0, 105.0, max_relative=0.05))

    def test_relative_eq_infinities(self):
        """Test that infinities only equal themselves."""
        self.assertTrue(approx.relative_eq(math.inf, math.inf))
        self.assertFalse(approx.relative_eq(math.inf, 1e308, max_relative=1.0))
        self.assertFalse(approx.relative_eq(math.inf, -math.inf))

    def test_ulps_eq(self):
        """Test ULP distance."""
        a = 1.0
        b = np.nextafter(np.nextafter(a, 2.0), 2.0)
        self.assertTrue(approx.ulps_eq(a, float(b), epsilon=0.0))
        self.assertFalse(approx.ulps_eq(a, float(b), epsilon=0.0, max_ulps=1))
        self.assertTrue(approx.ulps_eq(0.0, -0.0))
        self.assertFalse(approx.ulps_eq(1e-300, -1e-300, epsilon=0.0))
        self.assertFalse(approx.ulps_eq(math.nan, math.nan))

    def test_ulps_eq_float32(self):
        """Test ULP distance on single precision."""
        a = np.float32(1.0)
        b = np.nextafter(a, np.float32(2.0))
        self.assertTrue(approx.ulps_eq(a, b, epsilon=np.float32(0), max_ulps=1))
        self.assertFalse(approx.ulps_eq(a, np.float32(1.001), epsilon=np.float32(0)))

    def test_ulps_eq_mixed_widths(self):
        """Test that mixed widths are measured in the wider format."""
        single = np.float32(1.0)
        double = np.nextafter(np.float64(1.0), np.float64(2.0))
        self.assertTrue(approx.ulps_eq(single, double, epsilon=0.0, max_ulps=1))
        self.assertTrue(approx.ulps_eq(double, single, epsilon=0.0, max_ulps=1))
        far = np.float64(1.0) + 8 * np.finfo(np.float64).eps
        self.assertFalse(approx.ulps_eq(single, far, epsilon=0.0, max_ulps=4))

    def test_ulps_eq_rejects_exact_kinds(self):
        """Test that ULP comparison needs binary floats."""
        with self.assertRaises(TypeError):
            approx.ulps_eq(1, 1)
        with self.assertRaises(TypeError):
            approx.ulps_eq(Fraction(1), Fraction(1))


class TestAngleApprox(unittest.TestCase):
    """Test approximate equality on angles and its unit selection."""

    def test_radians_compare_in_radians(self):
        """Test that a Radians pair uses radian tolerance."""
        self.assertTrue(Radians(1.0).abs_diff_eq(Radians(1.009), 0.01))
        self.assertFalse(Radians(1.0).abs_diff_eq(Radians(1.02), 0.01))

    def test_mixed_and_degrees_compare_in_degrees(self):
        """Test that any other pairing uses degree tolerance."""
        # 0.01 rad is about 0.57°, outside a 0.1° tolerance
        self.assertFalse(Radians(1.0).abs_diff_eq(Degrees(math.degrees(1.01)), 0.1))
        self.assertTrue(Degrees(90.0).abs_diff_eq(Radians(math.pi / 2), 1e-9))
        self.assertTrue(Degrees(90.0).abs_diff_eq(Degrees(90.05), 0.1))

    def test_relative_and_ulps(self):
        """Test the relative and ULP forms across units."""
        self.assertTrue(Degrees(180.0).relative_eq(Radians(math.pi)))
        self.assertTrue(Degrees(180.0).ulps_eq(Radians(math.pi)))
        self.assertTrue(Radians(0.1 + 0.2).ulps_eq(Radians(0.3)))
        self.assertFalse(Degrees(180.0).relative_eq(Degrees(181.0)))

    def test_default_tolerance_catches_conversion_error(self):
        """Test that a degree round trip stays within default tolerance."""
        angle = Radians(0.3)
        round_trip = Degrees(angle.in_degrees())
        self.assertTrue(angle.ulps_eq(Radians(round_trip.in_radians())))


if __name__ == '__main__':
    unittest.main()
