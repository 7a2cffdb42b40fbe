"""Expose ORM models."""
from .property import Property

__all__ = [
    "Property",
]
