"""Concurrency — async pool for batch file processing."""

from alignby.concurrency.pool import ConcurrencyPool

__all__ = ["ConcurrencyPool"]
