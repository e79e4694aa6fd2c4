"""Porkbun dynamic DNS updater."""

__version__ = "0.1.0"
