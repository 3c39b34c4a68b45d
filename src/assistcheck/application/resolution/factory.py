"""Factory interface and factory method resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.application.resolution.classifier import classify_parameters
from assistcheck.domain.model.elements import ExecutableDecl, TypeDecl
from assistcheck.domain.model.enums import ExecutableKind, FailureKind, TypeKind
from assistcheck.domain.model.failure import ValidationFailure
from assistcheck.domain.model.injection_request import FactoryMethod

if TYPE_CHECKING:
    from assistcheck.domain.model.configuration import ProcessorConfig
    from assistcheck.domain.ports.symbol_model import SymbolModel


class FactoryResolver:
    """Finds the nested factory interface of a candidate and its factory method.

    Rules are checked in order, the first violation is returned:
    1. exactly one nested type carries the factory marker
    2. it is an interface and not private
    3. exactly one method remains after dropping default-body,
       static/class-level and private helpers
    4. optionally (check_return_type), the method returns the candidate
       or one of its declared bases

    Stateless: safe to reuse across candidates and rounds.
    """

    def __init__(self, model: SymbolModel, config: ProcessorConfig) -> None:
        self._model = model
        self._config = config

    def resolve(self, candidate: TypeDecl) -> tuple[TypeDecl, FactoryMethod] | ValidationFailure:
        """Resolve factory interface and method for candidate.

        Args:
            candidate: Type under validation

        Returns:
            (factory interface, factory method), or the first ValidationFailure
        """
        factory = self._find_factory_type(candidate)
        if isinstance(factory, ValidationFailure):
            return factory

        method = self._find_factory_method(factory, candidate)
        if isinstance(method, ValidationFailure):
            return method

        return factory, FactoryMethod(
            declaration=method,
            parameters=classify_parameters(method, self._config),
        )

    def _find_factory_type(self, candidate: TypeDecl) -> TypeDecl | ValidationFailure:
        marker = self._config.factory_marker
        factories = [
            element
            for element in self._model.enclosed_elements(candidate)
            if isinstance(element, TypeDecl) and marker in element.markers
        ]

        if not factories:
            return ValidationFailure(
                FailureKind.CARDINALITY,
                f"No nested @{marker} found.",
                candidate,
            )
        if len(factories) > 1:
            return ValidationFailure(
                FailureKind.CARDINALITY,
                f"Multiple @{marker} types found.",
                candidate,
            )

        factory = factories[0]
        if factory.kind is not TypeKind.INTERFACE:
            return ValidationFailure(
                FailureKind.STRUCTURAL,
                f"@{marker} must be an interface.",
                factory,
            )
        if factory.is_private:
            return ValidationFailure(
                FailureKind.STRUCTURAL,
                f"@{marker} must not be private.",
                factory,
            )
        return factory

    def _find_factory_method(
        self,
        factory: TypeDecl,
        candidate: TypeDecl,
    ) -> ExecutableDecl | ValidationFailure:
        methods = [
            element
            for element in self._model.enclosed_elements(factory)
            if isinstance(element, ExecutableDecl)
            and element.kind is ExecutableKind.METHOD
            and not element.is_default  # convenience overloads
            and not element.is_static  # static/class-level helpers
            and not element.is_private  # helpers for default methods
        ]

        if not methods:
            return ValidationFailure(
                FailureKind.CARDINALITY,
                "Factory interface does not define a factory method.",
                factory,
            )
        if len(methods) > 1:
            return ValidationFailure(
                FailureKind.CARDINALITY,
                "Factory interface defines multiple factory methods.",
                factory,
            )

        method = methods[0]
        if self._config.check_return_type and not _returns_candidate(method, candidate):
            return ValidationFailure(
                FailureKind.STRUCTURAL,
                "Factory method returns incorrect type. "
                f"Must be {candidate.name} or one of its supertypes.",
                method,
            )
        return method


def _type_name(text: str) -> str:
    """Bare class name of an annotation: quotes, generics and module path dropped."""
    bare = text.strip().strip("'\"")
    bare = bare.split("[", 1)[0]
    return bare.rsplit(".", 1)[-1].strip()


def _returns_candidate(method: ExecutableDecl, candidate: TypeDecl) -> bool:
    """Return annotation names the candidate or one of its declared bases.

    Only declared bases are known statically; transitive supertypes are not
    resolved.
    """
    if method.return_type is None:
        return False
    accepted = {candidate.name, *(_type_name(base) for base in candidate.bases)}
    return _type_name(method.return_type) in accepted
