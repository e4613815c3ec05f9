"""Core pricing entities."""

from .entities import Cart, Price, Sku

__all__ = ["Cart", "Price", "Sku"]
