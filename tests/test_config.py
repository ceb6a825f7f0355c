import logging
import unittest
import gpreg as gp
import gpreg.num as gnp
from gpreg.config import get_config, get_logger, set_log_level, set_kernel_method


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.config = get_config()
        self.saved = (self.config.variance_tolerance, self.config.kernel_method)

    def tearDown(self):
        self.config.update(variance_tolerance=self.saved[0], kernel_method=self.saved[1])

    def test_update(self):
        self.config.update(variance_tolerance=1e-6)
        self.assertEqual(get_config().variance_tolerance, 1e-6)
        with self.assertRaises(AttributeError):
            self.config.update(backend="torch")

    def test_tolerance_is_used(self):
        self.config.update(variance_tolerance=1e-2)
        gp.core.check_posterior_variance(gnp.array([-1e-3]))

    def test_kernel_method(self):
        set_kernel_method("direct")
        self.assertEqual(gp.Model(1e-2).method, "direct")
        with self.assertRaises(ValueError):
            set_kernel_method("loop")

    def test_gp_batch_uses_configured_method(self):
        set_kernel_method("direct")
        level = get_logger().level
        set_log_level(logging.DEBUG)
        with self.assertLogs("gpreg", level="DEBUG") as cm:
            gp.core.gp_batch(gnp.array([[0.0], [1.0]]), gnp.zeros(2), gnp.array([[0.5]]), 1e-2, 1.0)
        set_log_level(level)
        self.assertTrue(any("method=direct" in line for line in cm.output))

    def test_logger(self):
        logger = get_logger()
        self.assertEqual(logger.name, "gpreg")
        level = logger.level
        set_log_level(logging.DEBUG)
        with self.assertLogs("gpreg", level="DEBUG") as cm:
            gp.core.FittedGP.fit(gnp.array([[0.0], [1.0]]), gnp.zeros(2), 1e-2, 1.0)
        set_log_level(level)
        self.assertTrue(any("fitted GP" in line for line in cm.output))

    def test_negative_variance_is_logged(self):
        with self.assertLogs("gpreg", level="WARNING"):
            with self.assertRaises(gp.NumericalError):
                gp.core.check_posterior_variance(gnp.array([-1.0]))

    def test_str(self):
        self.assertIn("variance_tolerance", str(self.config))
        self.assertIn("GPRegConfig", repr(self.config))
        self.assertEqual(gp.__version__, self.config.version)


class TestDesigns(unittest.TestCase):
    def test_regulargrid(self):
        x = gp.misc.designs.regulargrid(2, 3, [[0, 0], [1, 2]])
        self.assertEqual(x.shape, (9, 2))
        self.assertEqual(x[0].tolist(), [0.0, 0.0])
        self.assertEqual(x[-1].tolist(), [1.0, 2.0])
        x = gp.misc.designs.regulargrid(2, [2, 4], [[0, 0], [1, 1]])
        self.assertEqual(x.shape, (8, 2))

    def test_scale(self):
        x = gp.misc.designs.scale(gnp.array([[0.0, 0.5], [1.0, 1.0]]), [[-1, 0], [1, 4]])
        self.assertEqual(x.tolist(), [[-1.0, 2.0], [1.0, 4.0]])
        with self.assertRaises(ValueError):
            gp.misc.designs.scale(gnp.array([[0.5]]), [[1], [0]])

    def test_randunif(self):
        box = [[-1, 0], [1, 5]]
        x1 = gp.misc.designs.randunif(2, 50, box, gnp.make_rng(0))
        x2 = gp.misc.designs.randunif(2, 50, box, gnp.make_rng(0))
        self.assertEqual(x1.shape, (50, 2))
        self.assertTrue((x1 == x2).all())
        self.assertTrue(((x1 >= [-1, 0]) & (x1 <= [1, 5])).all())


if __name__ == "__main__":
    unittest.main()
