# Defaults shared by the command-line front end.

DEFAULT_QUANTUM = 2
DEFAULT_ALGORITHMS = ["fcfs", "sjf", "rr"]

# Decimal places used when printing averages.
FLOAT_PRECISION = 2

LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"
