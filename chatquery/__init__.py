"""Chat query adapters: one formatted status line per third-party lookup."""

__version__ = "1.0.0"
