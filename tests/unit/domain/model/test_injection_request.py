"""Tests for domain/model/injection_request.py."""

import pytest

from assistcheck.domain.model.enums import TypeKind
from assistcheck.domain.model.injection_request import (
    FactoryMethod,
    InjectionRequest,
    ResolvedConstructor,
)
from assistcheck.domain.model.key import Key
from assistcheck.domain.model.parameter import Parameter
from tests.factories import (
    MODULE,
    assisted,
    make_constructor,
    make_factory,
    make_method,
    make_type,
    plain,
    provided,
)

OWNER = f"{MODULE}.Widget"
ID = Parameter(name="id", type="int", is_assisted=True)
LOGGER = Parameter(name="logger", type="Logger")


def _constructor() -> ResolvedConstructor:
    decl = make_constructor(OWNER, assisted("id"), provided("logger"))
    return ResolvedConstructor(declaration=decl, parameters=(ID, LOGGER))


def _factory_method() -> FactoryMethod:
    decl = make_method(f"{OWNER}.Factory", "create", plain("id"), returns="Widget")
    return FactoryMethod(declaration=decl, parameters=(Parameter(name="id", type="int"),))


class TestResolvedConstructor:
    """Tests for ResolvedConstructor pools."""

    def test_pools(self) -> None:
        constructor = _constructor()
        assert constructor.assisted == (ID,)
        assert constructor.provided == (LOGGER,)

    def test_requires_constructor(self) -> None:
        decl = make_method(OWNER, "build")
        with pytest.raises(ValueError, match="is not a constructor"):
            ResolvedConstructor(declaration=decl, parameters=())

    def test_every_parameter_classified(self) -> None:
        decl = make_constructor(OWNER, assisted("id"), provided("logger"))
        with pytest.raises(ValueError, match="classified exactly once"):
            ResolvedConstructor(declaration=decl, parameters=(ID,))


class TestFactoryMethod:
    """Tests for FactoryMethod."""

    def test_accessors(self) -> None:
        method = _factory_method()
        assert method.name == "create"
        assert method.return_type == "Widget"
        assert method.keys == (Key("int"),)


class TestInjectionRequest:
    """Tests for InjectionRequest invariants."""

    def test_valid_request(self) -> None:
        factory = make_factory(OWNER, _factory_method().declaration)
        widget = make_type("Widget", nested=(factory,))
        request = InjectionRequest(
            target_type=widget,
            constructor=_constructor(),
            factory_interface=factory,
            factory_method=_factory_method(),
            all_parameters=(ID, LOGGER),
        )
        assert request.assisted_parameters == (ID,)
        assert request.provided_parameters == (LOGGER,)
        assert request.factory_parameters == (Parameter(name="id", type="int"),)

    def test_factory_must_be_interface(self) -> None:
        factory = make_factory(OWNER, kind=TypeKind.CLASS)
        with pytest.raises(ValueError, match="is not an interface"):
            InjectionRequest(
                target_type=make_type("Widget", nested=(factory,)),
                constructor=_constructor(),
                factory_interface=factory,
                factory_method=_factory_method(),
                all_parameters=(ID, LOGGER),
            )

    def test_factory_must_be_nested_in_target(self) -> None:
        factory = make_factory(f"{MODULE}.Other")
        with pytest.raises(ValueError, match="must be nested in"):
            InjectionRequest(
                target_type=make_type("Widget"),
                constructor=_constructor(),
                factory_interface=factory,
                factory_method=_factory_method(),
                all_parameters=(ID, LOGGER),
            )

    def test_all_parameters_match_constructor(self) -> None:
        factory = make_factory(OWNER)
        with pytest.raises(ValueError, match="must match the constructor"):
            InjectionRequest(
                target_type=make_type("Widget", nested=(factory,)),
                constructor=_constructor(),
                factory_interface=factory,
                factory_method=_factory_method(),
                all_parameters=(LOGGER, ID),
            )
