from .fibonacci import FibonacciState, create_fibonacci_unit
from .average import AverageState, create_average_unit

__all__ = [
    "FibonacciState", "create_fibonacci_unit",
    "AverageState", "create_average_unit",
]
