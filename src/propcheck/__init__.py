"""
Propcheck: composable generators and reduction strategies for property-based testing.

Generators produce random values of a given shape; reductions propose
simpler values of the same shape so a failing example can be minimised
without leaving the space the generator could have produced.
"""

__version__ = "0.1.0"
