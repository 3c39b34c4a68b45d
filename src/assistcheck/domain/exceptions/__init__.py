"""Domain exceptions."""

from assistcheck.domain.exceptions.base import AssistCheckError
from assistcheck.domain.exceptions.configuration import ConfigurationError
from assistcheck.domain.exceptions.emit import EmitError
from assistcheck.domain.exceptions.parsing import ParsingError

__all__ = [
    "AssistCheckError",
    "ConfigurationError",
    "EmitError",
    "ParsingError",
]
