import unittest
import gpreg as gp
import gpreg.num as gnp
from gpreg.kernel import median_heuristic, upper_triangle_median_heuristic


class TestMedianHeuristic(unittest.TestCase):
    def test_three_points(self):
        # full matrix: 0, 0, 0, 25, 25, 25, 25, 100, 100
        xi = gnp.array([[-5.0], [0.0], [5.0]])
        self.assertAlmostEqual(median_heuristic(xi), 25.0)

    def test_median_includes_zero_diagonal(self):
        # full matrix: 0, 0, 0, 1, 1, 4, 4, 9, 9 ; distinct pairs: 1, 4, 9
        xi = gnp.array([[0.0], [1.0], [3.0]])
        self.assertAlmostEqual(median_heuristic(xi), 1.0)
        self.assertAlmostEqual(upper_triangle_median_heuristic(xi), 4.0)

    def test_two_points(self):
        # full matrix: 0, 0, 4, 4
        xi = gnp.array([[0.0], [2.0]])
        self.assertAlmostEqual(median_heuristic(xi), 2.0)

    def test_multidimensional(self):
        xi = gnp.array([[0.0, 0.0], [3.0, 4.0], [0.0, 4.0]])
        # full matrix: 0, 0, 0, 9, 9, 16, 16, 25, 25
        self.assertAlmostEqual(median_heuristic(xi), 16.0)

    def test_identical_points(self):
        with self.assertRaises(gp.DegenerateBandwidthError):
            median_heuristic(gnp.array([[0.0], [0.0], [0.0]]))

    def test_mostly_identical_points(self):
        with self.assertRaises(gp.DegenerateBandwidthError):
            median_heuristic(gnp.array([[0.0], [0.0], [0.0], [1.0]]))

    def test_upper_triangle_needs_two_points(self):
        with self.assertRaises(gp.DegenerateBandwidthError):
            upper_triangle_median_heuristic(gnp.array([[1.0]]))

    def test_single_point(self):
        with self.assertRaises(gp.DegenerateBandwidthError):
            median_heuristic(gnp.array([[1.0, 2.0]]))


if __name__ == "__main__":
    unittest.main()
