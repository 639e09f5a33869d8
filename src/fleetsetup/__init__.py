"""Fleet setup engine for grid-based ship placement games."""

__version__ = "0.1.0"
