import unittest
import numpy as np
import gpreg as gp
import gpreg.num as gnp


class TestModel(unittest.TestCase):
    def setUp(self):
        rng = gnp.make_rng(1)
        self.xi = gp.misc.designs.randunif(2, 25, [[-2, -2], [2, 2]], rng)
        self.zi = np.cos(self.xi[:, 0]) * np.sin(self.xi[:, 1])
        self.xt = gp.misc.designs.regulargrid(2, 6, [[-2.5, -2.5], [2.5, 2.5]])
        self.model = gp.Model(noise_variance=1e-3)

    def test_predictors_agree(self):
        zpm_b, zpv_b = self.model.predict(self.xi, self.zi, self.xt)
        zpm_o, zpv_o = self.model.predict(self.xi, self.zi, self.xt, predictor="online")
        zpm_n, zpv_n = self.model.predict(self.xi, self.zi, self.xt, predictor="naive")
        self.assertEqual(zpv_b.shape, (36,))
        self.assertEqual(zpv_n.shape, (36,))
        self.assertTrue(np.allclose(zpm_o, zpm_b, rtol=0.0, atol=1e-9))
        self.assertTrue(np.allclose(zpv_o, zpv_b, rtol=0.0, atol=1e-9))
        self.assertTrue(np.allclose(zpm_n, zpm_b, rtol=0.0, atol=1e-7))
        self.assertTrue(np.allclose(zpv_n, zpv_b, rtol=0.0, atol=1e-7))

    def test_return_types(self):
        _, zpv = self.model.predict(self.xi, self.zi, self.xt, return_type=1)
        self.assertEqual(zpv.shape, (36, 36))
        _, zpv = self.model.predict(self.xi, self.zi, self.xt, predictor="naive", return_type=1)
        self.assertEqual(zpv.shape, (36, 36))
        _, zpv = self.model.predict(self.xi, self.zi, self.xt, predictor="online", return_type=-1)
        self.assertIsNone(zpv)
        with self.assertRaises(ValueError):
            self.model.predict(self.xi, self.zi, self.xt, predictor="online", return_type=1)
        with self.assertRaises(ValueError):
            self.model.predict(self.xi, self.zi, self.xt, return_type=3)

    def test_fit_uses_median_heuristic(self):
        fitted = self.model.fit(self.xi, self.zi)
        self.assertEqual(fitted.sigmasq, gp.kernel.median_heuristic(self.xi))
        self.assertEqual(fitted.method, "vectorized")
        fitted = gp.Model(1e-3, sigmasq=0.7, method="direct").fit(self.xi, self.zi)
        self.assertEqual(fitted.sigmasq, 0.7)
        self.assertEqual(fitted.method, "direct")

    def test_direct_and_vectorized_models_agree(self):
        m_direct = gp.Model(1e-3, method="direct")
        zpm_d, zpv_d = m_direct.predict(self.xi, self.zi, self.xt)
        zpm_v, zpv_v = self.model.predict(self.xi, self.zi, self.xt)
        self.assertTrue(np.allclose(zpm_d, zpm_v, rtol=0.0, atol=1e-6))
        self.assertTrue(np.allclose(zpv_d, zpv_v, rtol=0.0, atol=1e-6))

    def test_predictor_factory(self):
        p = self.model.predictor(self.xi, self.zi, "online", noisy=True)
        self.assertIsInstance(p, gp.core.OnlinePredictor)
        self.assertTrue(p.noisy)
        with self.assertRaises(ValueError):
            self.model.predictor(self.xi, self.zi, "exact")

    def test_invalid_method(self):
        with self.assertRaises(ValueError):
            gp.Model(1e-3, method="loop")

    def test_str(self):
        self.assertIn("median heuristic", str(self.model))
        self.assertIn("Noise variance: 0.001", str(self.model))
        self.assertIn("gpreg.core.Model", repr(self.model))

    def test_sample_paths(self):
        zsim1 = self.model.sample_paths(self.xt, 4, rng=gnp.make_rng(3), xi=self.xi)
        zsim2 = self.model.sample_paths(self.xt, 4, rng=gnp.make_rng(3), xi=self.xi)
        self.assertEqual(zsim1.shape, (36, 4))
        self.assertTrue(np.array_equal(zsim1, zsim2))

    def test_posterior_sample_paths(self):
        zsim = self.model.posterior_sample_paths(self.xi, self.zi, self.xi, 5, rng=gnp.make_rng(4))
        self.assertEqual(zsim.shape, (25, 5))
        self.assertTrue(np.all(np.abs(zsim - self.zi.reshape(-1, 1)) < 0.5))


if __name__ == "__main__":
    unittest.main()
