"""Elm image module generator."""

__version__ = "0.1.0"
