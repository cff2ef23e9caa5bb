"""Console post-office desk: offices, parcels, delivery times and hand-over."""

__version__ = "0.1.0"
__all__ = ["__version__"]