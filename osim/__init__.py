"""Classic operating-system algorithms: CPU scheduling, page replacement,
memory allocation, the banker's algorithm, shared memory and producer/consumer."""

__version__ = "0.1.0"