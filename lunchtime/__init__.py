"""
lunchtime - measure how much of a time span falls into the daily lunch break.
"""

__version__ = "1.0.0"
