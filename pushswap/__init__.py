"""Sort integers with the push_swap two-stack instruction set, plus small string, memory and formatting helpers."""

__version__ = "1.0.0"