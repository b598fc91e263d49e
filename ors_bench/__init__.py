"""Scenario generation and request synthesis for isochrone range load tests.

Expands benchmark settings into a matrix of scenarios and builds the
``/v2/isochrones`` request body for every simulated-user iteration.
"""

from ._version import __version__

__all__ = ["__version__"]
