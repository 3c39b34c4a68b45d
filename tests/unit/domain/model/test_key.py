"""Tests for domain/model/key.py and domain/model/parameter.py."""

import pytest

from assistcheck.domain.model.key import Key
from assistcheck.domain.model.parameter import Parameter


class TestKey:
    """Tests for Key identity."""

    def test_equal_when_type_and_qualifier_equal(self) -> None:
        assert Key("int") == Key("int")
        assert Key("str", 'Named("a")') == Key("str", 'Named("a")')

    def test_qualifier_distinguishes(self) -> None:
        assert Key("str") != Key("str", 'Named("a")')
        assert Key("str", 'Named("a")') != Key("str", 'Named("b")')

    def test_hashable_in_sets(self) -> None:
        keys = {Key("int"), Key("int"), Key("str", 'Named("a")')}
        assert len(keys) == 2

    def test_str_unqualified(self) -> None:
        assert str(Key("Logger")) == "Logger"

    def test_str_qualified(self) -> None:
        assert str(Key("str", 'Named("user")')) == 'Annotated[str, Named("user")]'

    def test_is_frozen(self) -> None:
        key = Key("int")
        with pytest.raises(AttributeError):
            key.type = "str"  # type: ignore[misc]


class TestKeyFailFirst:
    """Tests for FAIL-FIRST validation in Key."""

    def test_empty_type_raises(self) -> None:
        with pytest.raises(ValueError, match="key type must not be empty"):
            Key("")

    def test_empty_qualifier_raises(self) -> None:
        with pytest.raises(ValueError, match="qualifier must be non-empty"):
            Key("int", "")


class TestParameter:
    """Tests for classified Parameter."""

    def test_key_combines_type_and_qualifier(self) -> None:
        param = Parameter(name="name", type="str", qualifier='Named("x")', is_assisted=True)
        assert param.key == Key("str", 'Named("x")')

    def test_provided_by_default(self) -> None:
        assert Parameter(name="logger", type="Logger").is_assisted is False

    def test_str_shows_role(self) -> None:
        assert str(Parameter(name="id", type="int", is_assisted=True)) == "id: int (assisted)"
        assert str(Parameter(name="log", type="Logger")) == "log: Logger (provided)"

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="parameter name must not be empty"):
            Parameter(name="", type="int")
