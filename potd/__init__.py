"""ARRIS password-of-the-day generator."""

__version__ = "0.3.0"
