"""Diagnostic sinks."""

from assistcheck.infrastructure.sinks.collecting import CollectingSink

__all__ = ["CollectingSink"]
