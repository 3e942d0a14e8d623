"""
Main entry point for droplet heating, evaporation and FLA simulation

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

from flavap.simulation import Simulation, SimulationParameters
import os
import time
import sys
from datetime import datetime
from flavap.core.logger import TeeLogger

# !important: set the OPENBLAS_NUM_THREADS to 1 will improve the performance of the code, if you use other blas library, you would better also to set the number of threads to 1
os.environ['OPENBLAS_NUM_THREADS'] = '1'


#* about the droplet fluid
# one single component fluid is active per run: 'water', 'dodecane' or 'isooctane'. The correlations are in
# flavap/solution/fluid_para.py, a new fluid needs its kernels there and a Fluid subclass in flavap/solution/fluid.py.
#* about the gas phase
# the gas state is frozen and read from a cantera input file with a transport model (air.yaml ships with cantera).

def main():
    case_name = "dodecane_20um_800K"  # case name
    # create the result directory and log file
    result_dir = os.path.join("result", case_name)
    os.makedirs(result_dir, exist_ok=True)
    log_filename = os.path.join(result_dir, f"{case_name}.log")

    # set the log recording
    logger = TeeLogger(log_filename)
    sys.stdout = logger

    try:
        # record the start time and basic information
        start_datetime = datetime.now()
        print(f"=== Droplet Heating and Evaporation Simulation Log ===")
        print(f"Case Name: {case_name}")
        print(f"Start Time: {start_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Log File: {log_filename}")
        print("="*50)

        params = SimulationParameters(
            case_name=case_name,
            fluid='dodecane',  # droplet fluid: water, dodecane, isooctane
            droplet_diameter=20e-6,  # droplet diameter, unit[m]
            droplet_temperature=300.0,  # initial droplet temperature, unit[K]
            gas_temperature=800.0,  # gas temperature, unit[K]
            pressure=101325.0,  # gas pressure, unit[Pa]
            reynolds=10.0,  # initial particle Reynolds number
            velocity_gradient=(100.0, 50.0, 0.0, -100.0),  # du/dx, du/dy, dv/dx, dv/dy, unit[1/s]
            time_step=1e-4,  # time step, unit[s]
            end_time=2e-2,  # end time, unit[s]
            cell_count=100,  # number of radial layers inside the droplet
            n_lambda=44,  # number of terms in the temperature series
        )

        # create simulation instance
        simulation = Simulation(params)

        # initialize simulation
        simulation.initialize()

        # start simulation
        start_time = time.time()
        simulation.run()
        end_time = time.time()
        total_time = end_time - start_time

        # end output
        end_datetime = datetime.now()
        print("="*50)
        print(f"Simulation completed successfully!")
        print(f"End Time: {end_datetime.strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"Total Simulation Time: {total_time:.2f} seconds")
        print(f"Total Wall Clock Time: {(end_datetime - start_datetime).total_seconds():.2f} seconds")
        print("="*50)

    except Exception as e:
        # record the error information
        print(f"ERROR: Simulation failed with exception: {str(e)}")
        import traceback
        print("Traceback:")
        print(traceback.format_exc())
        raise
    finally:
        # restore the standard output and close the log file
        sys.stdout = logger.terminal
        logger.close()

if __name__ == "__main__":
    main()
