"""Constructor resolver."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.application.resolution.classifier import classify_parameters
from assistcheck.domain.model.elements import ExecutableDecl
from assistcheck.domain.model.enums import ExecutableKind, FailureKind
from assistcheck.domain.model.failure import ValidationFailure
from assistcheck.domain.model.injection_request import ResolvedConstructor

if TYPE_CHECKING:
    from assistcheck.domain.model.configuration import ProcessorConfig
    from assistcheck.domain.model.elements import TypeDecl
    from assistcheck.domain.ports.symbol_model import SymbolModel


class ConstructorResolver:
    """Finds the single assisted constructor of a candidate.

    Rules are checked in order, the first violation is returned:
    1. candidate is not private
    2. nested candidate is static (never fires for parsed Python source)
    3. exactly one constructor carries the constructor marker
    4. that constructor is not private

    Stateless: safe to reuse across candidates and rounds.
    """

    def __init__(self, model: SymbolModel, config: ProcessorConfig) -> None:
        self._model = model
        self._config = config

    def resolve(self, candidate: TypeDecl) -> ResolvedConstructor | ValidationFailure:
        """Resolve the assisted constructor of candidate.

        Args:
            candidate: Type under validation

        Returns:
            ResolvedConstructor with classified parameters, or the first
            ValidationFailure encountered
        """
        marker = self._config.constructor_marker

        if candidate.is_private:
            return ValidationFailure(
                FailureKind.STRUCTURAL,
                f"@{marker}-using types must not be private",
                candidate,
            )

        if candidate.is_nested and not candidate.is_static:
            return ValidationFailure(
                FailureKind.STRUCTURAL,
                f"Nested @{marker}-using types must be static",
                candidate,
            )

        constructors = [
            element
            for element in self._model.enclosed_elements(candidate)
            if isinstance(element, ExecutableDecl) and element.kind is ExecutableKind.CONSTRUCTOR
        ]
        marked = [c for c in constructors if marker in c.markers]

        if not marked:
            return ValidationFailure(
                FailureKind.CARDINALITY,
                f"Assisted injection requires an @{marker}-annotated constructor "
                f"with at least one {self._config.assisted_marker} parameter.",
                candidate,
            )
        if len(marked) > 1:
            return ValidationFailure(
                FailureKind.CARDINALITY,
                f"Multiple @{marker}-annotated constructors found.",
                candidate,
            )

        constructor = marked[0]
        if constructor.is_private:
            return ValidationFailure(
                FailureKind.STRUCTURAL,
                f"@{marker} constructor must not be private.",
                constructor,
            )

        return ResolvedConstructor(
            declaration=constructor,
            parameters=classify_parameters(constructor, self._config),
        )
