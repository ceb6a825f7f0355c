import unittest
import numpy as np
import gpreg as gp
import gpreg.num as gnp
from gpreg.kernel import (
    sqdist,
    sqdist_vectorized,
    kernel_matrix,
    kernel_matrix_vectorized,
    squared_exponential_covariance,
    median_heuristic,
)


class TestKernelMatrix(unittest.TestCase):
    def setUp(self):
        rng = gnp.make_rng(42)
        self.x = gp.misc.designs.randunif(3, 25, [[-3, -3, -3], [3, 3, 3]], rng)
        self.y = gp.misc.designs.randunif(3, 10, [[-4, -4, -4], [4, 4, 4]], rng)
        self.sigmasq = median_heuristic(self.x)

    def test_self_kernel_unit_diagonal_and_symmetric(self):
        for K in (
            kernel_matrix(self.x, self.x, self.sigmasq),
            kernel_matrix(self.x, None, self.sigmasq),
            kernel_matrix_vectorized(self.x, self.sigmasq),
        ):
            self.assertTrue(np.array_equal(np.diag(K), np.ones(self.x.shape[0])))
            self.assertTrue(np.array_equal(K, K.T))

    def test_self_distance_is_exactly_zero(self):
        x = gnp.array([[1.0e3, -2.5e2], [0.1, 0.2], [7.0, 7.0]])
        self.assertTrue(np.array_equal(np.diag(sqdist_vectorized(x)), np.zeros(3)))
        self.assertTrue(np.array_equal(np.diag(sqdist(x)), np.zeros(3)))

    def test_direct_and_vectorized_agree(self):
        K_direct = kernel_matrix(self.x, self.y, self.sigmasq)
        K_vect = kernel_matrix_vectorized(self.x, self.sigmasq, self.y)
        self.assertEqual(K_direct.shape, (25, 10))
        self.assertTrue(np.allclose(K_direct, K_vect, rtol=0.0, atol=1e-9))

        K_direct = kernel_matrix(self.x, self.x, self.sigmasq)
        K_vect = kernel_matrix_vectorized(self.x, self.sigmasq)
        self.assertTrue(np.allclose(K_direct, K_vect, rtol=0.0, atol=1e-9))

    def test_direct_and_vectorized_agree_far_from_origin(self):
        rng = gnp.make_rng(7)
        x = gp.misc.designs.randunif(2, 20, [[0, 0], [1, 1]], rng) + 1e4
        y = gp.misc.designs.randunif(2, 7, [[0, 0], [1, 1]], rng) + 1e4
        for y_ in (y, None):
            K_direct = kernel_matrix(x, y_, 0.5)
            K_vect = kernel_matrix_vectorized(x, 0.5, y_)
            self.assertTrue(np.allclose(K_direct, K_vect, rtol=0.0, atol=1e-9))

    def test_distances_are_nonnegative(self):
        D = sqdist_vectorized(self.x, self.y)
        self.assertTrue(np.all(D >= 0.0))

    def test_known_values(self):
        x = gnp.array([[0.0], [1.0]])
        y = gnp.array([[0.0], [2.0]])
        K = kernel_matrix(x, y, 2.0)
        K_expected = np.array([[1.0, np.exp(-2.0)], [np.exp(-0.5), np.exp(-0.5)]])
        self.assertTrue(np.allclose(K, K_expected, rtol=0.0, atol=1e-15))
        self.assertTrue(np.allclose(kernel_matrix_vectorized(x, 2.0, y), K_expected))

    def test_integer_inputs(self):
        K = kernel_matrix_vectorized([[-5], [0], [5]], 1.0)
        self.assertEqual(K.dtype, np.float64)
        self.assertEqual(K[1, 1], 1.0)

    def test_dispatcher(self):
        K1 = squared_exponential_covariance(self.x, self.y, self.sigmasq, method="direct")
        K2 = squared_exponential_covariance(self.x, self.y, self.sigmasq, method="vectorized")
        self.assertTrue(np.allclose(K1, K2, rtol=0.0, atol=1e-9))
        with self.assertRaises(ValueError):
            squared_exponential_covariance(self.x, self.y, self.sigmasq, method="loop")

    def test_non_positive_bandwidth(self):
        for sigmasq in (0.0, -1.0, float("nan")):
            with self.assertRaises(gp.DegenerateBandwidthError):
                kernel_matrix(self.x, self.y, sigmasq)
            with self.assertRaises(gp.DegenerateBandwidthError):
                kernel_matrix_vectorized(self.x, sigmasq)

    def test_dimension_mismatch(self):
        with self.assertRaises(gp.DimensionMismatchError):
            kernel_matrix(self.x, self.y[:, :2], 1.0)
        with self.assertRaises(gp.DimensionMismatchError):
            kernel_matrix_vectorized(self.x, 1.0, self.y[:, :2])
        with self.assertRaises(gp.DimensionMismatchError):
            kernel_matrix_vectorized(gnp.array([0.0, 1.0, 2.0]), 1.0)


if __name__ == "__main__":
    unittest.main()
