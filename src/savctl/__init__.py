"""savctl — savings-account search and query toolkit."""

__version__ = "0.1.0"
