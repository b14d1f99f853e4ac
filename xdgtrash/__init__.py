"""Move files to, list, restore from and empty an XDG-style trash."""

__version__ = "0.1.0"

__all__ = ["__version__"]