"""Candidate collection."""

from assistcheck.application.collectors.candidates import CandidateCollector

__all__ = ["CandidateCollector"]
