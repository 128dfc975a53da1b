"""Checkout: Order aggregate persistence on SQLAlchemy."""

__version__ = "0.1.0"
