"""
CARBONIX estimation engine.

Pure, deterministic calculators for industry emissions, carbon credit
requirements and NGO ecosystem sequestration.
"""

__version__ = "1.0.0"
