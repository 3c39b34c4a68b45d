"""Key-set matcher: pool checks and assisted/factory bijection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from assistcheck.application.resolution.keys import bullet_list, difference, duplicates
from assistcheck.domain.model.enums import FailureKind
from assistcheck.domain.model.failure import ValidationFailure

if TYPE_CHECKING:
    from assistcheck.domain.model.configuration import ProcessorConfig
    from assistcheck.domain.model.injection_request import FactoryMethod, ResolvedConstructor

MISMATCH_MESSAGE = "Factory method parameters do not match constructor {marker} parameters."


class KeyMatcher:
    """Validates constructor parameter pools against the factory method.

    Checks run in order and stop at the first failure:
    1. assisted pool not empty
    2. provided pool not empty
    3. no duplicate key among assisted parameters
    4. no duplicate key among provided parameters
    5. factory keys == assisted keys (as sets, order ignored)

    Within one check every offending key is collected before reporting.
    An assisted and a provided parameter may share a key: pools are
    consumed separately.
    """

    def __init__(self, config: ProcessorConfig) -> None:
        self._config = config

    def match(
        self,
        constructor: ResolvedConstructor,
        factory_method: FactoryMethod,
    ) -> ValidationFailure | None:
        """Run all checks.

        Args:
            constructor: Resolved constructor with classified parameters
            factory_method: Resolved factory method

        Returns:
            None when valid, otherwise the first ValidationFailure
        """
        return self.check_pools(constructor) or self.check_factory_keys(
            constructor, factory_method
        )

    def check_pools(self, constructor: ResolvedConstructor) -> ValidationFailure | None:
        """Checks 1-4: pool sizes and per-pool duplicates."""
        assisted = self._config.assisted_marker
        declaration = constructor.declaration
        assisted_keys = [p.key for p in constructor.assisted]
        provided_keys = [p.key for p in constructor.provided]

        if not assisted_keys:
            return ValidationFailure(
                FailureKind.POOL,
                f"Assisted injection requires at least one {assisted} parameter.",
                declaration,
            )
        if not provided_keys:
            return ValidationFailure(
                FailureKind.POOL,
                f"Assisted injection requires at least one non-{assisted} parameter.",
                declaration,
            )

        if duplicated := duplicates(assisted_keys):
            return ValidationFailure(
                FailureKind.DUPLICATION,
                f"Duplicate {assisted} parameters declared. Forget a qualifier annotation?"
                + bullet_list(duplicated),
                declaration,
            )
        if duplicated := duplicates(provided_keys):
            return ValidationFailure(
                FailureKind.DUPLICATION,
                f"Duplicate non-{assisted} parameters declared. Forget a qualifier annotation?"
                + bullet_list(duplicated),
                declaration,
            )
        return None

    def check_factory_keys(
        self,
        constructor: ResolvedConstructor,
        factory_method: FactoryMethod,
    ) -> ValidationFailure | None:
        """Check 5: factory method keys equal assisted keys as sets.

        Both "Missing" and "Unknown" sections are always rendered.
        """
        expected = [p.key for p in constructor.assisted]
        actual = list(factory_method.keys)

        if frozenset(actual) == frozenset(expected):
            return None

        missing = difference(expected, actual)
        unknown = difference(actual, expected)
        message = (
            MISMATCH_MESSAGE.format(marker=self._config.assisted_marker)
            + "\n\nMissing:"
            + (bullet_list(missing) or "\n (none)")
            + "\n\nUnknown:"
            + (bullet_list(unknown) or "\n (none)")
        )
        return ValidationFailure(FailureKind.MISMATCH, message, factory_method.declaration)
