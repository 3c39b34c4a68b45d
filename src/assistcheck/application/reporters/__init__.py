"""Reporters for processing round results."""

from assistcheck.application.reporters._base import BaseReporter
from assistcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from assistcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
