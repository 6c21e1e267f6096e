"""Grocery list, purchase history and co-purchase recommendation API."""

__version__ = "0.1.0"
