"""
Default parameters for the simulator and its command-line interface.
"""

# Round Robin time quantum used when none is given on the command line
DEFAULT_QUANTUM = 2

# Algorithms run by `compare` when none are listed
COMPARE_ALGORITHMS = ("fcfs", "sjf", "rr")

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
