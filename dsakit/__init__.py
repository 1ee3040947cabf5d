"""Classic data structures and algorithms, CPU scheduling simulations and console games."""

__version__ = "0.1.0"