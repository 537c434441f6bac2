"""
Genetic-algorithm approximation of the travelling salesman problem over 2D cities.
"""

__all__ = [
    "data",
    "distances",
    "errors",
    "evaluation",
    "evolutionary",
    "operators",
]
