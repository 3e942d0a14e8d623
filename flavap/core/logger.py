"""
logger module

Copyright (c) 2024 Droplet Combustion Simulation 1D
Licensed under the MIT License - see LICENSE file for details.
"""

import sys


class TeeLogger:
    """duplicate everything written to stdout into a log file

    usage:
        logger = TeeLogger(log_filename)
        sys.stdout = logger
        ...
        sys.stdout = logger.terminal
        logger.close()
    """
    def __init__(self, filename: str, mode: str = "w"):
        self.terminal = sys.stdout
        self.log = open(filename, mode, encoding="utf-8")

    def write(self, message: str):
        self.terminal.write(message)
        self.log.write(message)

    def flush(self):
        self.terminal.flush()
        self.log.flush()

    def isatty(self) -> bool:
        return False

    def close(self):
        if not self.log.closed:
            self.log.close()
