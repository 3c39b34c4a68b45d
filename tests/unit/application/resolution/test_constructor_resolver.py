"""Tests for application/resolution/constructor.py."""

from assistcheck.application.resolution.constructor import ConstructorResolver
from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.domain.model.enums import FailureKind, Visibility
from assistcheck.domain.model.failure import ValidationFailure
from assistcheck.domain.model.injection_request import ResolvedConstructor
from tests.factories import (
    MODULE,
    assisted,
    make_constructor,
    make_model,
    make_type,
    make_widget,
    provided,
)

CONFIG = ProcessorConfig()
OWNER = f"{MODULE}.Widget"


def _resolve(candidate, *others):
    model = make_model(candidate, *others)
    return ConstructorResolver(model, CONFIG).resolve(candidate)


class TestConstructorResolverSuccess:
    """Tests for successful resolution."""

    def test_resolves_single_marked_constructor(self) -> None:
        result = _resolve(make_widget())

        assert isinstance(result, ResolvedConstructor)
        assert [p.name for p in result.assisted] == ["id"]
        assert [p.name for p in result.provided] == ["logger"]

    def test_unmarked_constructors_ignored(self) -> None:
        widget = make_type(
            "Widget",
            constructors=(
                make_constructor(OWNER, provided("logger"), marked=False),
                make_constructor(OWNER, assisted("id"), provided("logger"), line=9),
            ),
        )
        result = _resolve(widget)
        assert isinstance(result, ResolvedConstructor)
        assert result.declaration.location.line == 9

    def test_protected_constructor_allowed(self) -> None:
        ctor = make_constructor(OWNER, assisted("id"), visibility=Visibility.PROTECTED)
        result = _resolve(make_type("Widget", constructors=(ctor,)))
        assert isinstance(result, ResolvedConstructor)


class TestConstructorResolverFailures:
    """Tests for each rule, in check order."""

    def test_private_type(self) -> None:
        widget = make_type(
            "__Widget",
            visibility=Visibility.PRIVATE,
            constructors=(make_constructor(f"{MODULE}.__Widget", assisted("id")),),
        )
        result = _resolve(widget)

        assert isinstance(result, ValidationFailure)
        assert result.kind is FailureKind.STRUCTURAL
        assert result.message == "@assisted_inject-using types must not be private"
        assert result.element is widget

    def test_non_static_nested_type(self) -> None:
        inner = make_type(
            "Inner",
            enclosing=f"{MODULE}.Outer",
            is_static=False,
            constructors=(make_constructor(f"{MODULE}.Outer.Inner", assisted("id")),),
        )
        model = make_model(make_type("Outer", nested=(inner,)))
        result = ConstructorResolver(model, CONFIG).resolve(inner)

        assert isinstance(result, ValidationFailure)
        assert result.message == "Nested @assisted_inject-using types must be static"

    def test_private_checked_before_static(self) -> None:
        inner = make_type(
            "__Inner",
            enclosing=f"{MODULE}.Outer",
            is_static=False,
            visibility=Visibility.PRIVATE,
        )
        model = make_model(make_type("Outer", nested=(inner,)))
        result = ConstructorResolver(model, CONFIG).resolve(inner)

        assert isinstance(result, ValidationFailure)
        assert "must not be private" in result.message

    def test_no_marked_constructor(self) -> None:
        widget = make_type(
            "Widget", constructors=(make_constructor(OWNER, assisted("id"), marked=False),)
        )
        result = _resolve(widget)

        assert isinstance(result, ValidationFailure)
        assert result.kind is FailureKind.CARDINALITY
        assert result.message == (
            "Assisted injection requires an @assisted_inject-annotated constructor "
            "with at least one Assisted parameter."
        )
        assert result.element is widget

    def test_multiple_marked_constructors(self) -> None:
        widget = make_type(
            "Widget",
            constructors=(
                make_constructor(OWNER, assisted("id")),
                make_constructor(OWNER, assisted("name", "str"), line=8),
            ),
        )
        result = _resolve(widget)

        assert isinstance(result, ValidationFailure)
        assert result.kind is FailureKind.CARDINALITY
        assert result.message == "Multiple @assisted_inject-annotated constructors found."

    def test_private_constructor_points_at_constructor(self) -> None:
        ctor = make_constructor(OWNER, assisted("id"), visibility=Visibility.PRIVATE)
        result = _resolve(make_type("Widget", constructors=(ctor,)))

        assert isinstance(result, ValidationFailure)
        assert result.message == "@assisted_inject constructor must not be private."
        assert result.element is ctor

    def test_custom_marker_in_message(self) -> None:
        config = ProcessorConfig(constructor_marker="inject")
        widget = make_type("Widget")
        result = ConstructorResolver(make_model(widget), config).resolve(widget)

        assert isinstance(result, ValidationFailure)
        assert "@inject-annotated constructor" in result.message
