"""Models, request helpers and service clients for fleet edge management."""

__version__ = "0.1.0"