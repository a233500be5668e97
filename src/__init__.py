"""
Health summary package.

This package provides tools for reading health entries from JSON and
workout logs from CSV, totalling workout minutes and charting progress
against a weekly goal.
"""

__version__ = "0.1.0"
