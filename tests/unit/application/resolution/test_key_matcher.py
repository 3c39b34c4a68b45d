"""Tests for application/resolution/key_matcher.py."""

from assistcheck.application.resolution.classifier import classify_parameters
from assistcheck.application.resolution.key_matcher import KeyMatcher
from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.domain.model.enums import FailureKind
from assistcheck.domain.model.injection_request import FactoryMethod, ResolvedConstructor
from tests.factories import MODULE, assisted, make_constructor, make_method, plain, provided

CONFIG = ProcessorConfig()
OWNER = f"{MODULE}.Widget"


def _constructor(*params) -> ResolvedConstructor:
    decl = make_constructor(OWNER, *params)
    return ResolvedConstructor(declaration=decl, parameters=classify_parameters(decl, CONFIG))


def _factory(*params) -> FactoryMethod:
    decl = make_method(f"{OWNER}.Factory", "create", *params, returns="Widget")
    return FactoryMethod(declaration=decl, parameters=classify_parameters(decl, CONFIG))


MATCHER = KeyMatcher(CONFIG)


class TestPoolChecks:
    """Tests for pool size and duplicate checks."""

    def test_valid_pools(self) -> None:
        assert MATCHER.check_pools(_constructor(assisted("id"), provided("logger"))) is None

    def test_no_assisted(self) -> None:
        constructor = _constructor(provided("logger"))
        failure = MATCHER.check_pools(constructor)

        assert failure is not None
        assert failure.kind is FailureKind.POOL
        assert failure.message == "Assisted injection requires at least one Assisted parameter."
        assert failure.element is constructor.declaration

    def test_no_provided(self) -> None:
        failure = MATCHER.check_pools(_constructor(assisted("id")))

        assert failure is not None
        assert failure.message == (
            "Assisted injection requires at least one non-Assisted parameter."
        )

    def test_empty_constructor_reports_assisted_first(self) -> None:
        failure = MATCHER.check_pools(_constructor())
        assert failure is not None
        assert "at least one Assisted" in failure.message

    def test_duplicate_assisted(self) -> None:
        failure = MATCHER.check_pools(
            _constructor(assisted("first", "str"), assisted("last", "str"), provided("logger"))
        )

        assert failure is not None
        assert failure.kind is FailureKind.DUPLICATION
        assert failure.message == (
            "Duplicate Assisted parameters declared. Forget a qualifier annotation?\n * str"
        )

    def test_duplicate_provided(self) -> None:
        failure = MATCHER.check_pools(
            _constructor(assisted("id"), provided("a"), provided("b"), provided("c", "Clock"))
        )

        assert failure is not None
        assert failure.message == (
            "Duplicate non-Assisted parameters declared. Forget a qualifier annotation?"
            "\n * Logger"
        )

    def test_qualifier_resolves_duplicates(self) -> None:
        constructor = _constructor(
            assisted("first", "str", 'Named("first")'),
            assisted("last", "str"),
            provided("logger"),
        )
        assert MATCHER.check_pools(constructor) is None

    def test_assisted_and_provided_may_share_key(self) -> None:
        assert MATCHER.check_pools(_constructor(assisted("a", "Logger"), provided("b"))) is None

    def test_every_duplicate_listed(self) -> None:
        failure = MATCHER.check_pools(
            _constructor(
                assisted("a", "str"),
                assisted("b", "int"),
                assisted("c", "str"),
                assisted("d", "int"),
                provided("logger"),
            )
        )
        assert failure is not None
        assert failure.message.endswith("\n * str\n * int")


class TestFactoryKeys:
    """Tests for factory/assisted key bijection."""

    def test_same_keys_any_order(self) -> None:
        constructor = _constructor(assisted("id"), assisted("name", "str"), provided("logger"))
        factory = _factory(plain("label", "str"), plain("n"))
        assert MATCHER.check_factory_keys(constructor, factory) is None

    def test_missing_and_unknown(self) -> None:
        constructor = _constructor(assisted("id"), provided("logger"))
        factory = _factory(plain("name", "str"))
        failure = MATCHER.check_factory_keys(constructor, factory)

        assert failure is not None
        assert failure.kind is FailureKind.MISMATCH
        assert failure.element is factory.declaration
        assert failure.message == (
            "Factory method parameters do not match constructor Assisted parameters."
            "\n\nMissing:\n * int"
            "\n\nUnknown:\n * str"
        )

    def test_missing_only_renders_none(self) -> None:
        constructor = _constructor(assisted("id"), assisted("name", "str"), provided("logger"))
        failure = MATCHER.check_factory_keys(constructor, _factory(plain("id")))

        assert failure is not None
        assert failure.message.endswith("\n\nMissing:\n * str\n\nUnknown:\n (none)")

    def test_qualifier_mismatch(self) -> None:
        constructor = _constructor(assisted("name", "str", 'Named("a")'), provided("logger"))
        failure = MATCHER.check_factory_keys(constructor, _factory(plain("name", "str")))

        assert failure is not None
        assert '\n * Annotated[str, Named("a")]' in failure.message

    def test_provided_key_in_factory_is_unknown(self) -> None:
        constructor = _constructor(assisted("id"), provided("logger"))
        failure = MATCHER.check_factory_keys(
            constructor, _factory(plain("id"), plain("logger", "Logger"))
        )

        assert failure is not None
        assert "Unknown:\n * Logger" in failure.message

    def test_repeated_factory_key_matches_as_set(self) -> None:
        constructor = _constructor(assisted("id"), provided("logger"))
        factory = _factory(plain("a"), plain("b"))
        assert MATCHER.check_factory_keys(constructor, factory) is None


class TestMatch:
    """Tests for combined check order."""

    def test_pools_checked_before_factory(self) -> None:
        failure = MATCHER.match(_constructor(provided("logger")), _factory(plain("x", "str")))
        assert failure is not None
        assert failure.kind is FailureKind.POOL

    def test_valid(self) -> None:
        constructor = _constructor(assisted("id"), provided("logger"))
        assert MATCHER.match(constructor, _factory(plain("i"))) is None
