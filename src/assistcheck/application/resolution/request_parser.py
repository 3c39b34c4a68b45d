"""Per-candidate resolution pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.application.resolution.constructor import ConstructorResolver
from assistcheck.application.resolution.factory import FactoryResolver
from assistcheck.application.resolution.key_matcher import KeyMatcher
from assistcheck.application.resolution.request_builder import build_request
from assistcheck.domain.model.failure import ValidationFailure

if TYPE_CHECKING:
    from assistcheck.domain.model.configuration import ProcessorConfig
    from assistcheck.domain.model.elements import TypeDecl
    from assistcheck.domain.model.injection_request import InjectionRequest
    from assistcheck.domain.ports.symbol_model import SymbolModel


class RequestParser:
    """Runs constructor resolution, factory resolution, key matching and
    request building for one candidate.

    Every step returns its value or a ValidationFailure; the first failure
    ends the candidate.
    """

    def __init__(self, model: SymbolModel, config: ProcessorConfig) -> None:
        self._constructors = ConstructorResolver(model, config)
        self._factories = FactoryResolver(model, config)
        self._matcher = KeyMatcher(config)

    def parse(self, candidate: TypeDecl) -> InjectionRequest | ValidationFailure:
        """Resolve candidate into an InjectionRequest.

        Args:
            candidate: Type carrying an assisted-injection marker

        Returns:
            InjectionRequest, or the first ValidationFailure
        """
        constructor = self._constructors.resolve(candidate)
        if isinstance(constructor, ValidationFailure):
            return constructor

        resolved = self._factories.resolve(candidate)
        if isinstance(resolved, ValidationFailure):
            return resolved
        factory, factory_method = resolved

        if failure := self._matcher.match(constructor, factory_method):
            return failure

        return build_request(candidate, constructor, factory, factory_method)
