"""Task tracking with priorities, due dates, filtering, sorting and an interactive prompt."""

__version__ = "3.0.0"
__all__ = ["__version__"]