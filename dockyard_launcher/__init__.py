"""Download the DockyardMC server jar and run it with Java, blocking or asynchronously."""

__version__ = "0.1.0"
__all__ = ["__version__"]