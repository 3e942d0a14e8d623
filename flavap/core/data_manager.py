"""
data manager module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

import csv
import os
import numpy as np


class DataManager:
    def __init__(self, case_name: str, simulation_params, cell_count: int, droplet_save_interval=10,
                 profile_save_interval=100, result_root: str = "result"):
        """
        initialize the data manager

        Args:
            case_name: case name
            simulation_params: simulation parameters object
            cell_count: number of radial layers of the temperature profile
            droplet_save_interval: droplet data save interval, default is 10
            profile_save_interval: temperature profile save interval, default is 100
            result_root: root directory of the results
        """
        self.case_name = case_name
        self.simulation_params = simulation_params
        self.iteration_count = 0
        self.droplet_save_interval = droplet_save_interval
        self.profile_save_interval = profile_save_interval
        self.result_dir = os.path.join(result_root, case_name)
        os.makedirs(self.result_dir, exist_ok=True)

        # 1. droplet state, evaporation diagnostics and FLA state
        self.droplet_header = [
            'Time', 'Diameter', 'D2_d', 'Mass', 'SurfaceTemp', 'AverageTemp', 'CentreTemp',
            'B_M', 'B_T', 'Nu', 'Sh', 'LatentHeat', 'Pe', 'K_eff',
            'VaporizationRate', 'dh_dt', 'dh_dt_scaled', 'dm_dt_scaled',
            'J_DET', 'N_P', 'N_J_SIGN', 'BETA'
        ]
        self.droplet_file = open(os.path.join(self.result_dir, f"droplet-{case_name}.csv"), "w", newline='')
        csv.writer(self.droplet_file).writerow(self.droplet_header)
        self.droplet_file.flush()

        # 2. radial temperature profile
        self.radius = np.arange(cell_count + 1) / cell_count
        self.profile_header = ['Time', 'Layer_Index', 'Radius', 'Temperature']
        self.profile_file = open(os.path.join(self.result_dir, f"profile-{case_name}.csv"), "w", newline='')
        csv.writer(self.profile_file).writerow(self.profile_header)
        self.profile_file.flush()

        # print the initialization parameters
        self._print_initialization_parameters()

    def _print_initialization_parameters(self):
        """print the initialization parameters of the data manager"""
        params = self.simulation_params
        print("\n=== the initialization parameters of the data manager ===")
        print(f"    case name: {self.case_name}")
        print(f"    droplet save interval: {self.droplet_save_interval}")
        print(f"    profile save interval: {self.profile_save_interval}")
        print(f"    result directory: {self.result_dir}")
        print(f"    fluid: {params.fluid}")
        print(f"    pressure: {params.pressure/1e5:.2f} bar")
        print(f"    droplet initial temperature: {params.droplet_temperature:.2f} K")
        print(f"    gas temperature: {params.gas_temperature:.2f} K")
        print(f"    droplet initial diameter: {params.droplet_diameter*1e6:.2f} um")
        print(f"    time step: {params.time_step:.3g} s")
        print("="*50+"\n")

    def save_droplet(self, time, particle, initial_diameter):
        if self.iteration_count % self.droplet_save_interval != 0:
            return
        storage = particle.storage
        diag = storage.diagnostics
        jac = storage.jacobian
        row = [time, particle.diameter, (particle.diameter / initial_diameter)**2, particle.mass,
               storage.profile.surface_temperature, diag.average_temperature, storage.profile.centre_temperature,
               diag.B_M, diag.B_T, diag.Nu, diag.Sh, diag.latent_heat, diag.Pe, diag.effective_conductivity,
               diag.vaporization_rate, diag.dh_dt, diag.dh_dt_scaled, diag.dm_dt_scaled,
               jac.J_DET, jac.N_P, jac.N_J_SIGN, jac.BETA]
        csv.writer(self.droplet_file).writerow(row)
        self.droplet_file.flush()
        print("=== droplet data ===")
        print(f"time: {time:.4g} s, diameter: {particle.diameter*1e6:.3f} um, (d/d0)^2: {row[2]:.4f}, "
              f"surface temperature: {row[4]:.2f} K, average temperature: {row[5]:.2f} K, \n"
              f"B_M: {diag.B_M:.4g}, B_T: {diag.B_T:.4g}, Nu: {diag.Nu:.4g}, evaporation rate: {diag.vaporization_rate:.4g} kg/s, "
              f"J_DET: {jac.J_DET:.6g}, N_P: {jac.N_P:.6g}, sign changes: {jac.N_J_SIGN}")
        print("="*50+"\n")

    def save_profile(self, time, profile):
        if self.iteration_count % self.profile_save_interval == 0:
            writer = csv.writer(self.profile_file)
            for i, temperature in enumerate(profile.temperature):
                writer.writerow([time, i, self.radius[i], temperature])
            self.profile_file.flush()

    def increment_iteration(self):
        self.iteration_count += 1

    def close(self):
        self.droplet_file.close()
        self.profile_file.close()

    def save_all(self, simulation):
        time = simulation.runtime.current_time
        self.save_droplet(time, simulation.particle, simulation.params.droplet_diameter)
        self.save_profile(time, simulation.particle.storage.profile)
