import unittest
import numpy as np

from flavap.core import ParticleState, ParticleStorage
from flavap.core.particle import JacobianState, RadialTemperatureProfile


class TestParticleStorage(unittest.TestCase):

    def test_injection_state(self):
        storage = ParticleStorage.create(100, 300.0, 3.6e5)
        np.testing.assert_array_equal(storage.profile.temperature, np.full(101, 300.0))
        self.assertEqual(storage.profile.cell_count, 100)
        diag = storage.diagnostics
        self.assertEqual(diag.average_temperature, 300.0)
        self.assertEqual(diag.latent_heat, 3.6e5)
        self.assertEqual(diag.Nu, 2.0)
        self.assertEqual((diag.B_M, diag.B_T), (0.0, 0.0))
        self.assertEqual(storage.jacobian, JacobianState())

    def test_reinitialize(self):
        storage = ParticleStorage.create(10, 300.0, 3.6e5)
        storage.profile.replace(np.linspace(300.0, 400.0, 11))
        storage.diagnostics.B_M = 0.3
        storage.jacobian.N_J_SIGN = 2
        storage.initialize(350.0, 3.4e5)
        np.testing.assert_array_equal(storage.profile.temperature, 350.0)
        self.assertEqual(storage.profile.cell_count, 10)
        self.assertEqual(storage.diagnostics.B_M, 0.0)
        self.assertEqual(storage.jacobian.N_J_SIGN, 0)

    def test_profile_size_mismatch(self):
        profile = RadialTemperatureProfile.create(10, 300.0)
        with self.assertRaisesRegex(ValueError, "profile size mismatch"):
            profile.replace(np.ones(12))


class TestJacobianState(unittest.TestCase):

    def test_vector_round_trip(self):
        state = JacobianState()
        state.set_vector(np.arange(1.0, 9.0))
        self.assertEqual(state.J21, 3.0)
        self.assertEqual(state.W22, 8.0)
        self.assertEqual(state.determinant(), 1.0 * 4.0 - 2.0 * 3.0)
        with self.assertRaisesRegex(ValueError, "8 components"):
            state.set_vector(np.ones(4))


class TestParticleState(unittest.TestCase):

    def test_create(self):
        particle = ParticleState.create(diameter=20e-6, density=744.0, temperature=300.0)
        self.assertAlmostEqual(particle.mass, 744.0 * np.pi * (20e-6)**3 / 6.0)
        self.assertAlmostEqual(ParticleState.diameter_from_mass(particle.mass, 744.0), 20e-6)
        self.assertAlmostEqual(particle.area, np.pi * (20e-6)**2)
        self.assertEqual(particle.component_count, 1)
        self.assertIsNone(particle.storage)


if __name__ == '__main__':
    unittest.main()
