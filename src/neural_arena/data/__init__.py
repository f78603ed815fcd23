"""Synthetic datasets for the arena levels."""

from .patterns import DataPoint, Pattern, generate_data

__all__ = ["DataPoint", "Pattern", "generate_data"]
