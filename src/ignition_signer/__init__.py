"""Canonical signatures for Ignition project resources."""

__version__ = "0.1.0"
