"""Rounding modes, numeric constants, error types and architecture detection."""

__version__ = "0.1.0"

__all__ = ["architecture", "exceptions", "rounding", "types"]