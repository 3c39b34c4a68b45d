"""Processor configuration.

Marker names are matched against the last dotted segment of a decorator
or Annotated metadata entry, so `@assisted_inject`,
`@assistcheck.assisted_inject` and `@markers.assisted_inject()` all match
the default constructor marker.
"""

from __future__ import annotations

from dataclasses import dataclass

from assistcheck.domain.exceptions.configuration import ConfigurationError

DEFAULT_CONSTRUCTOR_MARKER = "assisted_inject"
DEFAULT_FACTORY_MARKER = "assisted_factory"
DEFAULT_ASSISTED_MARKER = "Assisted"
DEFAULT_QUALIFIER_MARKERS = frozenset({"Named", "Qualifier"})
DEFAULT_GENERATED_SUFFIX = "_AssistedFactory"


@dataclass(frozen=True, slots=True)
class ProcessorConfig:
    """Immutable processor configuration with FAIL-FIRST validation.

    Attributes:
        constructor_marker: Decorator marking the assisted constructor
        factory_marker: Class decorator marking the nested factory interface
        assisted_marker: Annotated metadata marking an assisted parameter
        qualifier_markers: Annotated metadata names treated as qualifiers
        check_return_type: Require the factory method to return the target
            type or one of its declared bases. Off by default.
        generated_suffix: Suffix of the generated factory class name
    """

    constructor_marker: str = DEFAULT_CONSTRUCTOR_MARKER
    factory_marker: str = DEFAULT_FACTORY_MARKER
    assisted_marker: str = DEFAULT_ASSISTED_MARKER
    qualifier_markers: frozenset[str] = DEFAULT_QUALIFIER_MARKERS
    check_return_type: bool = False
    generated_suffix: str = DEFAULT_GENERATED_SUFFIX

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for field_name in ("constructor_marker", "factory_marker", "assisted_marker"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.isidentifier():
                raise ConfigurationError(field_name, f"must be an identifier, got {value!r}")

        markers = {self.constructor_marker, self.factory_marker, self.assisted_marker}
        if len(markers) != 3:
            raise ConfigurationError("markers", "marker names must be distinct")

        if not isinstance(self.qualifier_markers, frozenset):
            raise ConfigurationError(
                "qualifier_markers",
                f"must be frozenset, got {type(self.qualifier_markers).__name__}",
            )
        for name in self.qualifier_markers:
            if not name.isidentifier():
                raise ConfigurationError("qualifier_markers", f"{name!r} is not an identifier")
        if self.assisted_marker in self.qualifier_markers:
            raise ConfigurationError(
                "qualifier_markers", f"must not contain assisted marker {self.assisted_marker!r}"
            )

        if not self.generated_suffix:
            raise ConfigurationError("generated_suffix", "must not be empty")
        if not f"X{self.generated_suffix}".isidentifier():
            raise ConfigurationError(
                "generated_suffix", f"{self.generated_suffix!r} is not a valid name suffix"
            )
