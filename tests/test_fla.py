import unittest
import numpy as np

from flavap.core.particle import JacobianState, EvaporationDiagnostics
from flavap.solvers.fla import (JacobianIntegrator, relaxation_time, scale_sources,
                                schiller_naumann_drag_factor)


class TestJacobianIntegrator(unittest.TestCase):

    def test_initialize(self):
        state = JacobianState(J11=3.0, W12=1.0, J_DET=-2.0, N_P=0.5, N_J_SIGN=4, BETA=10.0)
        JacobianIntegrator.initialize(state)
        np.testing.assert_array_equal(state.as_vector(), [1, 0, 0, 1, 0, 0, 0, 0])
        self.assertEqual(state.J_DET, 1.0)
        self.assertEqual(state.N_P, 1.0)
        self.assertEqual(state.N_J_SIGN, 0)

    def test_uniform_flow(self):
        """zero velocity gradient keeps the identity"""
        state = JacobianState()
        for _ in range(50):
            JacobianIntegrator.step(state, np.zeros(4), 1e-3, 1e-4)
        np.testing.assert_allclose(state.as_vector(), [1, 0, 0, 1, 0, 0, 0, 0], atol=1e-14)
        self.assertAlmostEqual(state.J_DET, 1.0)
        self.assertAlmostEqual(state.N_P, 1.0)
        self.assertEqual(state.N_J_SIGN, 0)
        self.assertAlmostEqual(state.BETA, 1e3)

    def test_extensional_flow_closed_form(self):
        """du/dx = a: τ·J'' + J' = a·J with J(0) = 1, J'(0) = 0"""
        a, tau, h, n_steps = 10.0, 1e-2, 1e-4, 100
        state = JacobianState()
        for _ in range(n_steps):
            JacobianIntegrator.step(state, (a, 0.0, 0.0, 0.0), tau, h)
        t = n_steps * h
        root = np.sqrt(1.0 / tau**2 + 4.0 * a / tau)
        s1, s2 = 0.5 * (-1.0 / tau + root), 0.5 * (-1.0 / tau - root)
        J11 = (s2 * np.exp(s1 * t) - s1 * np.exp(s2 * t)) / (s2 - s1)
        W11 = s1 * s2 * (np.exp(s1 * t) - np.exp(s2 * t)) / (s2 - s1)
        np.testing.assert_allclose(state.J11, J11, rtol=1e-8)
        np.testing.assert_allclose(state.W11, W11, rtol=1e-8)
        self.assertAlmostEqual(state.J22, 1.0)
        self.assertAlmostEqual(state.J12, 0.0)
        np.testing.assert_allclose(state.J_DET, J11, rtol=1e-8)
        np.testing.assert_allclose(state.N_P, 1.0 / J11, rtol=1e-8)

    def test_compressive_flow_folds(self):
        """strong compression drives det J through zero once before t = 6 ms"""
        state = JacobianState()
        for _ in range(600):
            JacobianIntegrator.step(state, (-1000.0, 0.0, 0.0, 0.0), 1e-2, 1e-5)
        self.assertEqual(state.N_J_SIGN, 1)
        self.assertLess(state.J_DET, 0.0)
        self.assertAlmostEqual(state.N_P, 1.0 / abs(state.J_DET))

    def test_invalid_relaxation_time(self):
        with self.assertRaisesRegex(ValueError, "relaxation time"):
            JacobianIntegrator.step(JacobianState(), np.zeros(4), 0.0, 1e-4)


class TestRelaxationTime(unittest.TestCase):

    def test_stokes_limit(self):
        d, rho, mu = 20e-6, 750.0, 3.7e-5
        self.assertAlmostEqual(relaxation_time(d, rho, mu, 0.0), rho * d**2 / (18.0 * mu))

    def test_drag_factor(self):
        self.assertAlmostEqual(schiller_naumann_drag_factor(0.0), 18.0)
        self.assertAlmostEqual(schiller_naumann_drag_factor(10.0), 18.0 * (1.0 + 0.15 * 10.0**0.687))
        self.assertAlmostEqual(schiller_naumann_drag_factor(2000.0), 18.0 * 0.44 * 2000.0 / 24.0)

    def test_invalid_input(self):
        with self.assertRaisesRegex(ValueError, "droplet diameter"):
            relaxation_time(0.0, 750.0, 3.7e-5, 0.0)
        with self.assertRaisesRegex(ValueError, "viscosity"):
            relaxation_time(20e-6, 750.0, 0.0, 0.0)


class TestScaleSources(unittest.TestCase):

    def test_scale_sources(self):
        diagnostics = EvaporationDiagnostics(dh_dt=2e-3, dm_dt=4e-9)
        scale_sources(diagnostics, 2.5)
        self.assertAlmostEqual(diagnostics.dh_dt_scaled, 5e-3)
        self.assertAlmostEqual(diagnostics.dm_dt_scaled, 1e-8)
        self.assertEqual(diagnostics.dh_dt, 2e-3)


if __name__ == '__main__':
    unittest.main()
