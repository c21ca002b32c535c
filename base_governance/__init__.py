"""Operator tooling for the base governance protocol contracts."""

__version__ = "0.2.0"
