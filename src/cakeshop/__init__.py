"""
Cake Shop ordering system built on GoF patterns
"""

__version__ = "1.0.0"
