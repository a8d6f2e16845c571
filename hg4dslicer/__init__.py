"""Mesh model, mesh utilities, geometry helpers and validation reports for valve-grid slicing."""

__version__ = "0.1.0"

__all__ = ["geometry", "meshtools", "model", "report"]