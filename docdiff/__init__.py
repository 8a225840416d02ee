"""Regression diff for two generations of a JSON documentation corpus."""

__version__ = "0.1.0"
