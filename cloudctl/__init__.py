"""cloudctl - command line client with a live terminal dashboard for the cloud API."""

__version__ = "0.1.0"

__all__ = ["__version__"]
