"""
Generic neighbourhoods.
"""

from .composite import CompositeNeighbourhood

__all__ = ["CompositeNeighbourhood"]
