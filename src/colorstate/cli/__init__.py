"""Command line interface for colorstate."""

from .main import cli

__all__ = ["cli"]
