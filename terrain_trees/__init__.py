"""Geometric primitives, container helpers and parameter handling for terrain indexing tools."""

__version__ = "0.1.0"