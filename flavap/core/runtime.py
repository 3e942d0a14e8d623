"""
runtime module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.

This module provides the basic control functions of the simulation runtime.

main functions:
1. time control
   - constant particle time step (DPM_DT by default)
   - track the current simulation time
   - control the simulation end time

2. running state management
   - provide the running state query interface
   - support manual stop of the simulation
"""

DPM_DT: float = 1e-4  # constant particle time step [s]


class Runtime:
    def __init__(self, time_step: float = DPM_DT, end_time: float = 1.0):
        """
        initialize the runtime class

        Args:
            time_step: constant time step, default 0.1ms
            end_time: end time, default 1s
        """
        if time_step <= 0.0:
            raise ValueError(f"time step must be greater than 0s, current value: {time_step}s")
        self.time_step = time_step
        self.end_time = end_time
        self.current_time = 0.0
        self.step_count = 0
        self.running = True

    def constant_time_step(self) -> float:
        """time step handed to every particle, independent of the particle state"""
        return self.time_step

    def is_running(self) -> bool:
        """
        check if the simulation is still running

        Returns:
            bool: if the current time is less than the end time and running is True, return True
        """
        # end time counts as reached within half a step
        return self.current_time < self.end_time - 0.5 * self.time_step and self.running

    def stop(self):
        """
        manually stop the simulation
        """
        self.running = False

    def advance(self):
        """
        advance the current time by one time step
        """
        self.step_count += 1
        self.current_time = self.step_count * self.time_step
