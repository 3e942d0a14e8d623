import unittest
import numpy as np

from flavap.solvers.evaporation_closure import (EvaporationClosure, ConvergenceError, BM_MAX, BM_MIN,
                                                spalding_mass_number, film_correction)


class TestEvaporationClosure(unittest.TestCase):

    def setUp(self):
        self.closure = EvaporationClosure()

    def test_no_evaporation(self):
        """B_M = 0 gives B_T = 0 and Nu = Nu*"""
        result = self.closure.heat_transfer_number(10.0, 0.7, 0.0, 1.0)
        self.assertEqual(result.B_T, 0.0)
        self.assertAlmostEqual(result.Nu, result.Nu_star)
        self.assertEqual(result.iterations, 1)

    def test_stagnant_droplet_nusselt(self):
        """Re = 0 gives the pure conduction limit Nu* = 2"""
        result = self.closure.heat_transfer_number(0.0, 0.7, 1.5, 1.0)
        self.assertAlmostEqual(result.Nu_star, 2.0)
        self.assertAlmostEqual(result.B_T, 2.5**0.5 - 1.0, places=6)

    def test_convergence(self):
        for B_M in np.linspace(0.0, 5.0, 11):
            for coef in (0.3, 1.0, 3.0):
                for reynolds in (0.0, 10.0, 100.0):
                    with self.subTest(B_M=B_M, coef=coef, reynolds=reynolds):
                        result = self.closure.heat_transfer_number(reynolds, 0.7, B_M, coef)
                        self.assertTrue(np.isfinite(result.B_T))
                        self.assertGreaterEqual(result.B_T, 0.0)
                        self.assertLessEqual(result.iterations, self.closure.max_iterations)
                        # fixed point
                        Nu_star = self.closure.nusselt_star(reynolds, 0.7, result.B_T)
                        expected = (1.0 + B_M)**(coef / Nu_star) - 1.0
                        self.assertAlmostEqual(result.B_T, expected, delta=1e-5)

    def test_bounded_iteration(self):
        closure = EvaporationClosure(max_iterations=1)
        with self.assertRaises(ConvergenceError) as context:
            closure.heat_transfer_number(0.0, 0.7, 2.0, 0.5)
        self.assertEqual(context.exception.iterations, 1)
        self.assertAlmostEqual(context.exception.last_value, 3.0**0.25 - 1.0)
        self.assertGreater(context.exception.residual, closure.accuracy)
        self.assertIsInstance(context.exception, RuntimeError)

    def test_spalding_mass_number(self):
        self.assertAlmostEqual(spalding_mass_number(0.5), 1.0)
        self.assertEqual(spalding_mass_number(0.0), 0.0)
        self.assertEqual(spalding_mass_number(1.0), BM_MAX)
        self.assertEqual(spalding_mass_number(-1e6), BM_MIN)

    def test_film_correction(self):
        self.assertAlmostEqual(film_correction(0.0), 1.0)
        self.assertAlmostEqual(film_correction(1.0), 2.0**0.7 * np.log(2.0))

    def test_sherwood(self):
        Sh_star, Sh = self.closure.sherwood(10.0, 1.5, 0.0)
        expected = 2.0 + (1.0 + 15.0)**(1.0 / 3.0) * 10.0**0.077 - 1.0
        self.assertAlmostEqual(Sh_star, expected)
        self.assertEqual(Sh, 0.0)
        Sh_star, Sh = self.closure.sherwood(10.0, 1.5, 1.0)
        self.assertAlmostEqual(Sh, np.log(2.0) * Sh_star)

    def test_invalid_iterations(self):
        with self.assertRaises(ValueError):
            EvaporationClosure(max_iterations=0)


if __name__ == '__main__':
    unittest.main()
