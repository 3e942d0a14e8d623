import unittest
import numpy as np

from flavap.core import CarrierPhaseState, ParticleState, ParticleStorage
from flavap.core.carrier import air
from flavap.solution import Dodecane, Water
from flavap.solvers import HeatMassTransfer, JacobianIntegrator, relaxation_time, scale_sources
from flavap.solvers.heat_mass import effective_conductivity


def hot_air(reynolds=10.0, diameter=20e-6):
    """air at 800 K and 1 atm, slip velocity along x for the given Reynolds number"""
    density, viscosity = 0.4413, 3.7e-5
    slip = reynolds * viscosity / (density * diameter)
    return CarrierPhaseState(temperature=800.0, pressure=101325.0, density=density,
                             velocity=(slip, 0.0, 0.0), viscosity=viscosity,
                             thermal_conductivity=0.0569, cp_mass=1099.0,
                             velocity_gradient=(10.0, 0.0, 0.0, 0.0))


def cold_droplet(fluid, carrier, diameter=20e-6, temperature=300.0, cell_count=100):
    particle = ParticleState.create(diameter=diameter, density=fluid.liquid_density(temperature),
                                    temperature=temperature, time_step=1e-4)
    particle.reynolds = carrier.reynolds(diameter, particle.velocity)
    particle.storage = ParticleStorage.create(cell_count, temperature, fluid.latent_heat(temperature))
    return particle


class TestHeatMassTransfer(unittest.TestCase):

    def setUp(self):
        self.fluid = Dodecane()
        self.carrier = hot_air()
        self.particle = cold_droplet(self.fluid, self.carrier)

    def test_first_step(self):
        self.assertAlmostEqual(self.particle.reynolds, 10.0)
        result = HeatMassTransfer(self.fluid).compute(self.particle, self.carrier)
        diag = self.particle.storage.diagnostics
        self.assertGreater(diag.B_M, 0.0)
        self.assertTrue(np.isfinite(diag.B_T))
        self.assertGreater(diag.B_T, 0.0)
        self.assertGreater(diag.Nu_star, 2.0)
        self.assertGreater(diag.Sh_star, 2.0)
        self.assertGreater(result.surface_temperature, 300.0)
        self.assertGreater(result.average_temperature, 300.0)
        self.assertLess(result.surface_temperature, 800.0)
        self.assertGreaterEqual(result.surface_temperature, self.particle.storage.profile.centre_temperature)
        self.assertGreater(result.vaporization_rate, 0.0)
        self.assertLess(result.mass_source, 0.0)
        self.assertLess(result.energy_source, 0.0)
        self.assertAlmostEqual(result.mass_source, -result.vaporization_rate)
        self.assertAlmostEqual(result.energy_source, -diag.dh_dt)

    def test_storage_updated(self):
        result = HeatMassTransfer(self.fluid).compute(self.particle, self.carrier)
        storage = self.particle.storage
        np.testing.assert_array_equal(storage.profile.temperature, result.profile)
        self.assertEqual(storage.diagnostics.average_temperature, result.average_temperature)
        self.assertEqual(storage.diagnostics.dm_dt, result.vaporization_rate)
        self.assertAlmostEqual(storage.diagnostics.latent_heat, self.fluid.latent_heat(300.0))
        self.assertAlmostEqual(result.heat_transfer_coefficient, storage.diagnostics.Nu * 0.0569 / 20e-6)
        # the particle itself is left to the caller
        self.assertEqual(self.particle.temperature, 300.0)
        self.assertEqual(self.particle.diameter, 20e-6)

    def test_consecutive_steps_heat_up(self):
        heat_mass = HeatMassTransfer(self.fluid)
        averages = [heat_mass.compute(self.particle, self.carrier).average_temperature for _ in range(5)]
        self.assertTrue(np.all(np.diff(averages) > 0.0))

    def test_supplied_latent_heat(self):
        HeatMassTransfer(self.fluid).compute(self.particle, self.carrier, latent_heat=2.5e5)
        self.assertAlmostEqual(self.particle.storage.diagnostics.latent_heat, 2.5e5)

    def test_infinite_conductivity_limit(self):
        base = cold_droplet(self.fluid, self.carrier)
        HeatMassTransfer(self.fluid).compute(base, self.carrier)
        spread = base.storage.profile.surface_temperature - base.storage.profile.centre_temperature
        self.assertGreater(spread, 1.0)

        HeatMassTransfer(self.fluid, conductivity_multiplier=1000.0).compute(self.particle, self.carrier)
        profile = self.particle.storage.profile.temperature
        self.assertLess(profile.max() - profile.min(), 1.0)
        self.assertGreater(profile.mean(), 300.0)

    def test_fla_coupling(self):
        heat_mass = HeatMassTransfer(self.fluid)
        storage = self.particle.storage
        JacobianIntegrator.initialize(storage.jacobian)
        for _ in range(3):
            heat_mass.compute(self.particle, self.carrier)
            tau = relaxation_time(self.particle.diameter, self.particle.density,
                                  self.carrier.viscosity, self.particle.reynolds)
            JacobianIntegrator.step(storage.jacobian, self.carrier.velocity_gradient, tau, self.particle.time_step)
            scale_sources(storage.diagnostics, storage.jacobian.N_P)
        self.assertEqual(storage.jacobian.N_J_SIGN, 0)
        self.assertGreater(storage.jacobian.J_DET, 1.0)
        self.assertAlmostEqual(storage.diagnostics.dh_dt_scaled,
                               storage.diagnostics.dh_dt * storage.jacobian.N_P)

    def test_water_droplet(self):
        water = Water()
        particle = cold_droplet(water, self.carrier)
        result = HeatMassTransfer(water).compute(particle, self.carrier)
        self.assertGreater(result.average_temperature, 300.0)
        self.assertGreater(result.vaporization_rate, 0.0)

    def test_multicomponent_warning(self):
        self.particle.component_count = 2
        with self.assertWarnsRegex(UserWarning, "2 components"):
            HeatMassTransfer(self.fluid).compute(self.particle, self.carrier)

    def test_invalid_particle(self):
        self.particle.storage = None
        with self.assertRaisesRegex(ValueError, "storage"):
            HeatMassTransfer(self.fluid).compute(self.particle, self.carrier)

    def test_effective_conductivity(self):
        self.assertEqual(effective_conductivity(0.0, 0.14), 0.14)
        self.assertAlmostEqual(effective_conductivity(30.0, 0.14), 1.86 * 0.14)
        self.assertAlmostEqual(effective_conductivity(1e8, 0.14), 2.72 * 0.14, places=6)


class TestCarrierPhaseState(unittest.TestCase):

    def test_from_cantera(self):
        carrier = CarrierPhaseState.from_cantera(air(800.0), velocity=(5.0, 0.0, 0.0),
                                                 velocity_gradient=(1.0, 2.0, 3.0, 4.0))
        self.assertAlmostEqual(carrier.temperature, 800.0)
        self.assertAlmostEqual(carrier.pressure, 101325.0)
        self.assertAlmostEqual(carrier.density, 0.4413, delta=5e-3)
        self.assertAlmostEqual(carrier.prandtl, 0.7, delta=0.05)
        self.assertEqual(carrier.vapour_mass_fraction, 0.0)
        np.testing.assert_array_equal(carrier.velocity_gradient, [1.0, 2.0, 3.0, 4.0])

    def test_reynolds(self):
        carrier = hot_air(reynolds=10.0)
        self.assertAlmostEqual(carrier.reynolds(20e-6, (0.0, 0.0, 0.0)), 10.0)
        self.assertAlmostEqual(carrier.slip_velocity(carrier.velocity), 0.0)

    def test_invalid_state(self):
        with self.assertRaisesRegex(ValueError, "temperature"):
            CarrierPhaseState(temperature=-1.0, pressure=1e5, density=1.0, velocity=(0, 0, 0),
                              viscosity=1e-5, thermal_conductivity=0.03, cp_mass=1000.0)
        with self.assertRaisesRegex(ValueError, "velocity gradient"):
            CarrierPhaseState(temperature=300.0, pressure=1e5, density=1.0, velocity=(0, 0, 0),
                              viscosity=1e-5, thermal_conductivity=0.03, cp_mass=1000.0,
                              velocity_gradient=(1.0, 2.0))


if __name__ == '__main__':
    unittest.main()
