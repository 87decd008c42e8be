"""
Exposure & overlap analysis for investment portfolios.

Pure transformations from (holdings, ETF constituent tables, sector map,
canonical ticker map) to sector exposure, look-through exposure, ETF
overlap and concentration warnings.
"""

__version__ = "0.1.0"
