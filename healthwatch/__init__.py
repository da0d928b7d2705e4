"""Health monitoring building blocks: client checks, maintenance windows, dashboard settings and alert providers."""

__version__ = "0.1.0"