"""Threaded simulation of the dining philosophers problem: argument parsing, timing, simulation and command line."""

__version__ = "1.0.0"
__all__ = ["__version__"]