"""Fruta que Caiu: catch falling fruit in a basket, in the terminal."""

__version__ = "1.0.0"

__all__ = ["__version__"]