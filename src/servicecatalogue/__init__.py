"""Read-only catalogue over the Resource Registry and Access Management metadata APIs."""

__version__ = "0.1.0"
