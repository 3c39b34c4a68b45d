"""Candidate resolution: constructor, factory, key matching, request building."""

from assistcheck.application.resolution.classifier import (
    classify_parameter,
    classify_parameters,
)
from assistcheck.application.resolution.constructor import ConstructorResolver
from assistcheck.application.resolution.factory import FactoryResolver
from assistcheck.application.resolution.key_matcher import KeyMatcher
from assistcheck.application.resolution.request_builder import build_request
from assistcheck.application.resolution.request_parser import RequestParser

__all__ = [
    "classify_parameter",
    "classify_parameters",
    "ConstructorResolver",
    "FactoryResolver",
    "KeyMatcher",
    "build_request",
    "RequestParser",
]
