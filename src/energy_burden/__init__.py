"""
Analytics for monthly utility energy burden metrics.

Aggregation, trend classification and geographic projection
of the Oregon energy burden metrics reported by regulated utilities.
"""

import importlib.metadata

from loguru import logger

__version__ = importlib.metadata.version("energy-burden-analytics")

logger.disable(__name__)
